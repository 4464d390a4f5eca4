"""
Shared pytest fixtures and utilities for testing
"""

import heapq

import pytest
import yaml

from grid_astar.core.grid import Grid
from grid_astar.core.path_utils import validate_path


REFERENCE_MAZE = [
    [0, 0, 0, 0, 0, 1, 0, 0, 0, 0],
    [0, 1, 1, 0, 0, 1, 0, 0, 0, 0],
    [0, 1, 1, 0, 0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 1, 0, 0, 0, 0],
    [0, 1, 0, 1, 1, 1, 0, 0, 1, 0],
    [0, 1, 0, 1, 0, 0, 0, 0, 1, 0],
    [0, 1, 0, 1, 0, 1, 1, 1, 1, 0],
    [0, 1, 0, 1, 0, 1, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 1, 0, 0, 0, 0],
]


@pytest.fixture
def maze_rows():
    """The 10x10 reference maze (0 = passable, 1 = blocked)"""
    return [list(row) for row in REFERENCE_MAZE]


@pytest.fixture
def maze_grid(maze_rows):
    return Grid(maze_rows)


@pytest.fixture
def open_grid():
    """5x5 grid with no obstacles"""
    return Grid([[0] * 5 for _ in range(5)])


@pytest.fixture
def enclosed_grid():
    """5x5 grid whose center cell is fully walled in"""
    return Grid([
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 1, 0, 1, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
    ])


@pytest.fixture
def config_file(tmp_path, maze_rows):
    """Write a YAML config for the reference maze and return its path"""
    def _write(rows=None, start=(9, 0), goal=(9, 9), **sections):
        config = {
            'grid': {'rows': rows if rows is not None else maze_rows},
            'start': list(start),
            'goal': list(goal),
        }
        config.update(sections)

        path = tmp_path / 'pathfind_config.yaml'
        path.write_text(yaml.safe_dump(config), encoding='utf-8')
        return path

    return _write


# Helper functions for tests

def step_cost(a, b, orthogonal_cost=1.0, diagonal_cost=1.4):
    """Cost of one move between adjacent cells"""
    if a[0] != b[0] and a[1] != b[1]:
        return diagonal_cost
    return orthogonal_cost


def dijkstra_cost(grid, start, goal, orthogonal_cost=1.0, diagonal_cost=1.4):
    """
    Reference shortest-path cost with plain Dijkstra

    Returns:
        Cost of the cheapest path, or None if the goal is unreachable
    """
    best = {tuple(start): 0.0}
    queue = [(0.0, tuple(start))]

    while queue:
        cost, cell = heapq.heappop(queue)
        if cell == tuple(goal):
            return cost
        if cost > best.get(cell, float('inf')):
            continue
        for neighbor in grid.get_neighbors(*cell):
            new_cost = cost + step_cost(cell, neighbor, orthogonal_cost, diagonal_cost)
            if new_cost < best.get(neighbor, float('inf')):
                best[neighbor] = new_cost
                heapq.heappush(queue, (new_cost, neighbor))

    return None


def assert_valid_path(grid, start, goal, path):
    """
    Assert that a path is a legal walk from start to goal

    Args:
        grid: Grid the path was computed on
        start: (row, col) the search started from
        goal: (row, col) the search targeted
        path: Result of AStar.find_path
    """
    assert path is not None, "Expected a path, got None"
    validate_path(grid, start, path)

    if tuple(start) == tuple(goal):
        assert path == [], f"Expected empty path for start == goal, got {path}"
    else:
        last = path[-1]
        assert (last.row, last.col) == tuple(goal), f"Path ends at {last}, expected {goal}"


def positions(path):
    """Convert a path of GridCells to a list of (row, col) tuples"""
    return [(cell.row, cell.col) for cell in path]
