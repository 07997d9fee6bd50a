"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """FIFO queue: items are pushed at the back and popped from the front."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._data: deque[T] = deque(iterable)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(self._data)

    def push(self, item: T) -> None:
        """Add ``item`` to the back of the queue."""
        self._data.append(item)

    def pop(self) -> T | None:
        """Remove and return the front item; an empty queue yields None."""
        if not self._data:
            return None
        return self._data.popleft()

    def front(self) -> T:
        """Return the front item without removing it."""
        if not self._data:
            raise IndexError("queue is empty")
        return self._data[0]

    def back(self) -> T:
        """Return the back item without removing it."""
        if not self._data:
            raise IndexError("queue is empty")
        return self._data[-1]

    def empty(self) -> bool:
        return not self._data

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> Queue[T]:
        """Return an independent queue holding the same items."""
        return type(self)(self._data)