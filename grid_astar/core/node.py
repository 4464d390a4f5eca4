"""
Per-cell search metadata
"""

from typing import Optional, Tuple


class SearchNode:
    """
    Search state for one grid cell.

    Nodes are allocated once per engine and reused across searches. The
    predecessor is stored as a (row, col) coordinate into the engine's node
    table rather than as a reference to another node.
    """

    __slots__ = ('row', 'col', 'g', 'h', 'f', 'parent', 'in_open_set', 'in_closed_set')

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.reset()

    def reset(self) -> None:
        """Return to the initial state"""
        self.g = 0.0
        self.h = 0.0
        self.f = self.g + self.h
        self.parent: Optional[Tuple[int, int]] = None
        self.in_open_set = False
        self.in_closed_set = False

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def is_pristine(self) -> bool:
        """True if the node carries no state from any search"""
        return (
            self.g == 0 and self.h == 0 and self.f == 0
            and self.parent is None
            and not self.in_open_set
            and not self.in_closed_set
        )

    def __repr__(self) -> str:
        return (
            f"SearchNode(row={self.row}, col={self.col}, g={self.g:.2f}, h={self.h:.2f}, "
            f"f={self.f:.2f}, open={self.in_open_set}, closed={self.in_closed_set})"
        )


def compare_by_f(a: SearchNode, b: SearchNode) -> int:
    """Three-way comparison of two nodes by total estimated cost"""
    if a.f < b.f:
        return -1
    if a.f > b.f:
        return 1
    return 0
