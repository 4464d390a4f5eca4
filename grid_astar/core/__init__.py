"""
Core search components: grid model, priority queue, A* engine
"""

from .astar import AStar, SearchStats
from .binary_heap import BinaryHeap, default_comparer
from .config import SearchConfig, PathfindConfig
from .exceptions import GridAStarError, HeapUnderflowError, InvalidPositionError, GridFormatError
from .grid import Grid, GridCell
from .node import SearchNode

__all__ = [
    'AStar',
    'SearchStats',
    'BinaryHeap',
    'default_comparer',
    'SearchConfig',
    'PathfindConfig',
    'GridAStarError',
    'HeapUnderflowError',
    'InvalidPositionError',
    'GridFormatError',
    'Grid',
    'GridCell',
    'SearchNode',
]
