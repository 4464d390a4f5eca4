"""
Grid A* Pathfinder
Shortest paths on passable/blocked grids with a reusable A* engine
"""

from importlib.metadata import version, PackageNotFoundError

from .core.astar import AStar, SearchStats
from .core.binary_heap import BinaryHeap
from .core.config import SearchConfig, PathfindConfig
from .core.exceptions import GridAStarError, HeapUnderflowError, InvalidPositionError, GridFormatError
from .core.grid import Grid, GridCell

try:
    __version__ = version("grid-astar")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "AStar",
    "SearchStats",
    "BinaryHeap",
    "SearchConfig",
    "PathfindConfig",
    "Grid",
    "GridCell",
    "GridAStarError",
    "HeapUnderflowError",
    "InvalidPositionError",
    "GridFormatError",
]
