"""
Minimum priority queue backed by a binary heap.

The heap is a plain list viewed as an almost-complete binary tree rooted at
index 0. For the element at index i:

- parent:      (i - 1) // 2
- left child:  2i + 1
- right child: 2i + 2

Heap property: for every non-root index i, comparer(A[parent(i)], A[i]) <= 0.
"""

from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from .exceptions import HeapUnderflowError

T = TypeVar('T')

Comparer = Callable[[Any, Any], float]


def default_comparer(a: Any, b: Any) -> int:
    """Three-way comparison using the elements' natural ordering"""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class BinaryHeap(Generic[T]):
    """
    Binary min-heap ordered by a caller-supplied three-way comparer.

    The comparer takes two elements and returns a negative number, zero, or a
    positive number. Ties pop in unspecified order. An inconsistent comparer
    produces an unspecified order but never an exception from the heap itself.

    Positions are tracked by element identity so that ``update()`` can repair
    the heap after an element's key changed in place.
    """

    def __init__(self, comparer: Optional[Comparer] = None):
        """
        Initialize an empty heap

        Args:
            comparer: Three-way comparison function (default: natural ordering)
        """
        self._array: List[T] = []
        self._comparer: Comparer = comparer or default_comparer
        self._positions: Dict[int, int] = {}
        # Copies held per element id; an element may be pushed more than once
        self._counts: Dict[int, int] = {}

    @property
    def length(self) -> int:
        """Number of elements currently held"""
        return len(self._array)

    def __len__(self) -> int:
        return len(self._array)

    def __bool__(self) -> bool:
        return bool(self._array)

    def __contains__(self, element: object) -> bool:
        return self._counts.get(id(element), 0) > 0

    def __iter__(self) -> Iterator[T]:
        # Heap order, not sorted order
        return iter(list(self._array))

    def __repr__(self) -> str:
        return f"BinaryHeap(length={len(self._array)})"

    def push(self, element: T) -> None:
        """Insert an element and restore heap order by sifting it up"""
        self._array.append(element)
        index = len(self._array) - 1
        self._positions[id(element)] = index
        self._counts[id(element)] = self._counts.get(id(element), 0) + 1
        self._sift_up(index)

    def pop(self) -> T:
        """
        Remove and return the minimum element

        Raises:
            HeapUnderflowError: If the heap is empty
        """
        if not self._array:
            raise HeapUnderflowError()

        root = self._array[0]
        last = self._array.pop()

        if self._array:
            self._array[0] = last
            self._positions[id(last)] = 0
            self._sift_down(0)

        key = id(root)
        remaining = self._counts[key] - 1
        if remaining:
            self._counts[key] = remaining
            # Another copy is still held; point at it
            self._positions[key] = self._index_of(root)
        else:
            del self._counts[key]
            del self._positions[key]

        return root

    def peek(self) -> T:
        """
        Return the minimum element without removing it

        Raises:
            HeapUnderflowError: If the heap is empty
        """
        if not self._array:
            raise HeapUnderflowError()
        return self._array[0]

    def update(self, element: T) -> None:
        """
        Restore heap order after an element's key changed in place

        Works for both decreased and increased keys.

        Raises:
            KeyError: If the element is not in the heap
        """
        index = self._index_of(element)
        index = self._sift_up(index)
        self._sift_down(index)

    def clear(self) -> None:
        """Remove all elements"""
        self._array.clear()
        self._positions.clear()
        self._counts.clear()

    # Internal helpers

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) >> 1

    @staticmethod
    def _left(i: int) -> int:
        return (i << 1) + 1

    @staticmethod
    def _right(i: int) -> int:
        return (i << 1) + 2

    def _index_of(self, element: T) -> int:
        index = self._positions.get(id(element))
        if index is not None and self._array[index] is element:
            return index

        # Same object pushed more than once; fall back to a scan
        for i, candidate in enumerate(self._array):
            if candidate is element:
                return i

        raise KeyError("element is not in the heap")

    def _less(self, i: int, j: int) -> bool:
        return self._comparer(self._array[i], self._array[j]) < 0

    def _swap(self, i: int, j: int) -> None:
        array = self._array
        array[i], array[j] = array[j], array[i]
        self._positions[id(array[i])] = i
        self._positions[id(array[j])] = j

    def _sift_up(self, i: int) -> int:
        """Move the element at i toward the root; return its final index"""
        while i > 0:
            p = self._parent(i)
            if not self._less(i, p):
                break
            self._swap(i, p)
            i = p
        return i

    def _sift_down(self, i: int) -> int:
        """Move the element at i toward the leaves; return its final index"""
        size = len(self._array)
        while True:
            left = self._left(i)
            right = self._right(i)
            smallest = i

            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right

            if smallest == i:
                return i

            self._swap(i, smallest)
            i = smallest
