"""Binary heaps stored in a flat list, and heap sort built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class MaxHeap(Generic[T]):
    """Binary heap whose root holds the largest value."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = list(values)
        size = len(self._items)
        for i in reversed(range(size // 2)):
            self._sift_down(self._items, i, size)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the values in heap (array) order."""
        return iter(list(self._items))

    def insert(self, value: T) -> None:
        """Add ``value`` and restore the heap property."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract(self) -> T:
        """Remove and return the root value."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(self._items, 0, len(self._items))
        return root

    def peek(self) -> T:
        """Return the root value without removing it."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def sort(self) -> list[T]:
        """Return the values heap-sorted; the heap itself is left intact.

        A max-heap yields ascending order, a min-heap descending order.
        """
        items = list(self._items)
        for end in range(len(items) - 1, 0, -1):
            items[0], items[end] = items[end], items[0]
            self._sift_down(items, 0, end)
        return items

    def _precedes(self, a: Any, b: Any) -> bool:
        return a > b

    def _sift_down(self, items: list[T], i: int, size: int) -> None:
        while True:
            best = i
            left = 2 * i + 1
            right = left + 1
            if left < size and self._precedes(items[left], items[best]):
                best = left
            if right < size and self._precedes(items[right], items[best]):
                best = right
            if best == i:
                return
            items[i], items[best] = items[best], items[i]
            i = best

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            parent = (i - 1) // 2
            if not self._precedes(items[i], items[parent]):
                return
            items[i], items[parent] = items[parent], items[i]
            i = parent


class MinHeap(MaxHeap[T]):
    """Binary heap whose root holds the smallest value."""

    def _precedes(self, a: Any, b: Any) -> bool:
        return a < b


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order using a max-heap."""
    return MaxHeap(values).sort()