"""
Helpers for working with search results.

- Check that a path is a legal walk over the grid
- Compute the cost of a path
- Compress a path down to its turning points
"""

from typing import List, Sequence, Tuple

from .grid import Grid, GridCell


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if two cells touch orthogonally or diagonally (and are distinct)"""
    d_row = abs(a[0] - b[0])
    d_col = abs(a[1] - b[1])
    return max(d_row, d_col) == 1


def validate_path(grid: Grid, start: Tuple[int, int], path: Sequence[GridCell]) -> None:
    """
    Check that a path is a walk of adjacent passable cells without repeats

    Args:
        grid: Grid the path was computed on
        start: (row, col) of the start cell, not part of the path
        path: Steps as returned by AStar.find_path

    Raises:
        ValueError: Describing the first violation found
    """
    visited = {tuple(start)}
    previous = tuple(start)

    for step_number, cell in enumerate(path, start=1):
        position = (cell.row, cell.col)

        if not grid.is_passable(*position):
            raise ValueError(f"Step {step_number} {position} is not a passable cell")
        if not is_adjacent(previous, position):
            raise ValueError(f"Step {step_number} {position} is not adjacent to {previous}")
        if position in visited:
            raise ValueError(f"Step {step_number} {position} revisits a cell")

        visited.add(position)
        previous = position


def path_cost(
    start: Tuple[int, int],
    path: Sequence[GridCell],
    orthogonal_cost: float = 1.0,
    diagonal_cost: float = 1.4
) -> float:
    """Total step cost of walking the path from start"""
    total = 0.0
    previous = tuple(start)

    for cell in path:
        if cell.row != previous[0] and cell.col != previous[1]:
            total += diagonal_cost
        else:
            total += orthogonal_cost
        previous = (cell.row, cell.col)

    return total


def compress_path(start: Tuple[int, int], path: Sequence[GridCell]) -> List[GridCell]:
    """
    Compress path by merging collinear steps.

    Keeps every cell where the direction changes plus the final cell.

    Args:
        start: (row, col) the path starts from
        path: Raw steps from pathfinding

    Returns:
        Turning points of the path, ending with the goal
    """
    if len(path) <= 1:
        return list(path)

    points = [GridCell(*start)] + list(path)
    compressed = []

    for i in range(1, len(points) - 1):
        prev_cell = points[i - 1]
        curr_cell = points[i]
        next_cell = points[i + 1]

        d_row1 = curr_cell.row - prev_cell.row
        d_col1 = curr_cell.col - prev_cell.col

        d_row2 = next_cell.row - curr_cell.row
        d_col2 = next_cell.col - curr_cell.col

        # Keep waypoint if direction changes
        if d_row1 != d_row2 or d_col1 != d_col2:
            compressed.append(curr_cell)

    compressed.append(points[-1])

    return compressed
