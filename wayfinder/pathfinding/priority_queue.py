"""Binary min-heap used as the A* frontier."""

from __future__ import annotations

from typing import Generic, List, Optional, Tuple, TypeVar

from .errors import EmptyQueueError


T = TypeVar("T")

# (element, priority)
Entry = Tuple[T, float]


class PriorityQueue(Generic[T]):
    """Array-backed binary min-heap keyed by a numeric priority.

    Entries live in a 1-indexed list; slot 0 holds a ``None`` sentinel so the
    children of ``i`` are ``2i`` and ``2i + 1``. There is no decrease-key:
    the same element may be inserted several times and every copy is kept.
    """

    def __init__(self) -> None:
        self._data: List[Optional[Entry]] = [None]

    def __len__(self) -> int:
        return len(self._data) - 1

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self)})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, element: T, priority: float) -> None:
        """Add ``element`` with ``priority``."""
        self._data.append((element, priority))
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T:
        """Remove and return the element with the smallest priority."""
        if self.empty():
            raise EmptyQueueError("pop from an empty priority queue")
        root = self._data[1]
        last = self._data.pop()
        if not self.empty():
            self._data[1] = last
            self._sift_down(1)
        return root[0]

    def peek(self) -> T:
        """Return the element with the smallest priority without removing it."""
        if self.empty():
            raise EmptyQueueError("peek into an empty priority queue")
        return self._data[1][0]

    def empty(self) -> bool:
        return len(self._data) == 1

    def clear(self) -> None:
        self._data = [None]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _priority(self, index: int) -> float:
        return self._data[index][1]

    def _swap(self, a: int, b: int) -> None:
        self._data[a], self._data[b] = self._data[b], self._data[a]

    def _sift_up(self, index: int) -> None:
        while index > 1:
            parent = index // 2
            if self._priority(index) >= self._priority(parent):
                return
            self._swap(index, parent)
            index = parent

    def _smallest_child(self, index: int) -> Optional[int]:
        """Return the index of the smaller child; the right one wins ties."""
        left = index * 2
        right = left + 1
        size = len(self._data)
        if left >= size:
            return None
        if right >= size:
            return left
        return left if self._priority(left) < self._priority(right) else right

    def _sift_down(self, index: int) -> None:
        while True:
            child = self._smallest_child(index)
            if child is None or self._priority(child) >= self._priority(index):
                return
            self._swap(index, child)
            index = child


__all__ = ["PriorityQueue"]
