"""
Output formatting and printing utilities for CLI
"""

from typing import List, Optional, Sequence

from ..core.astar import SearchStats
from ..core.grid import Grid, GridCell


def render_overlay(grid: Grid, path: Optional[Sequence[GridCell]], marker: str = '.') -> List[str]:
    """
    Draw the grid with path cells replaced by a marker

    Args:
        grid: Grid that was searched
        path: Steps returned by the engine (None draws the bare grid)
        marker: Character drawn on path cells

    Returns:
        One string per grid row, cells separated by spaces
    """
    cells = [[str(value) for value in row] for row in grid.rows]

    for cell in path or []:
        cells[cell.row][cell.col] = marker

    return [' '.join(row) for row in cells]


def format_path(path: Sequence[GridCell]) -> str:
    """Format steps as '(r, c) -> (r, c) -> ...'"""
    return ' -> '.join(f"({cell.row}, {cell.col})" for cell in path)


def print_result(
    grid: Grid,
    path: Optional[Sequence[GridCell]],
    stats: Optional[SearchStats],
    marker: str = '.',
    show_grid: bool = True
) -> None:
    """Pretty print a search result"""
    if path is None:
        print("🚫 No path found")
    elif not path:
        print("✅ Start is the goal: 0 steps")
    else:
        print(f"✅ Path found: {len(path)} steps")
        print(f"   {format_path(path)}")

    if stats is not None:
        if stats.path_cost is not None:
            print(f"   Cost: {stats.path_cost:.2f}")
        print(f"   Nodes expanded: {stats.expanded:,} (discovered {stats.discovered:,}, improved {stats.improved:,})")

    if show_grid:
        print()
        for line in render_overlay(grid, path, marker):
            print(line)
