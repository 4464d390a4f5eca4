"""
Custom exceptions for the grid search core
"""


class GridAStarError(Exception):
    """Base exception for all grid_astar errors"""
    pass


class HeapUnderflowError(GridAStarError, IndexError):
    """Raised when popping or peeking an empty priority queue"""

    def __init__(self, message: str = "heap underflow"):
        super().__init__(message)


class InvalidPositionError(GridAStarError, ValueError):
    """Raised when a search endpoint is outside the grid or on a blocked cell"""

    def __init__(self, row: int, col: int, reason: str):
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(f"invalid position ({row}, {col}): {reason}")


class GridFormatError(GridAStarError, ValueError):
    """Raised when grid input cannot be turned into a grid"""
    pass
