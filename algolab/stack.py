"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack backed by a Python list."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._data: list[T] = list(iterable)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._data)

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        self._data.append(item)

    def pop(self) -> T | None:
        """Remove and return the top item; an empty stack yields None."""
        if not self._data:
            return None
        return self._data.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._data:
            raise IndexError("Stack is empty")
        return self._data[-1]

    def empty(self) -> bool:
        return not self._data

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> Stack[T]:
        """Return an independent stack holding the same items."""
        return type(self)(self._data)