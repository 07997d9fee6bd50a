"""A doubly linked list built around a circular sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList(Generic[T]):
    """Doubly linked list with O(1) appends at both ends.

    The sentinel node closes the list into a ring: its ``next`` is the first
    element and its ``prev`` the last, so an empty list is the sentinel alone.
    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._sentinel = _Node()
        self._size = 0
        for value in iterable:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(index).value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: T) -> None:
        """Add ``value`` after the last element."""
        self._link_before(self._sentinel, value)

    def appendleft(self, value: T) -> None:
        """Add ``value`` before the first element."""
        self._link_before(self._sentinel.next, value)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Out-of-range and negative indices behave as for ``list.insert``.
        """
        if index < 0:
            index = max(index + self._size, 0)
        if index >= self._size:
            successor = self._sentinel
        else:
            successor = self._node_at(index)
        self._link_before(successor, value)

    def swap(self, other: LinkedList[T]) -> None:
        """Exchange the contents of this list with ``other``."""
        self._sentinel, other._sentinel = other._sentinel, self._sentinel
        self._size, other._size = other._size, self._size

    def copy(self) -> LinkedList[T]:
        """Return a new list holding the same values."""
        return type(self)(self)

    def middle(self) -> T:
        """Return the value ``len(self) // 2`` steps from the front."""
        if not self._size:
            raise IndexError("middle of an empty list")
        node = self._sentinel.next
        for _ in range(self._size // 2):
            node = node.next
        return node.value

    def create_loop(self) -> None:
        """Point the fourth node back at the first, forming a cycle.

        Only meant for exercising :meth:`has_loop`; iterating the list
        afterwards never ends.
        """
        if self._size < 4:
            raise ValueError("a loop needs at least four elements")
        first = self._sentinel.next
        first.next.next.next.next = first

    def has_loop(self) -> bool:
        """Return True if following the links from the first node returns to it."""
        if not self._size:
            return False
        first = self._sentinel.next
        node = first.next
        while node is not self._sentinel:
            if node is first:
                return True
            node = node.next
        return False

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        left = self._sentinel.next
        right = self._sentinel.prev
        for _ in range(self._size // 2):
            left.value, right.value = right.value, left.value
            left = left.next
            right = right.prev

    def _node_at(self, index: int) -> _Node:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        if index < self._size // 2:
            node = self._sentinel.next
            for _ in range(index):
                node = node.next
        else:
            node = self._sentinel.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _link_before(self, successor: _Node, value: T) -> None:
        node = _Node(value)
        predecessor = successor.prev
        node.prev = predecessor
        node.next = successor
        predecessor.next = node
        successor.prev = node
        self._size += 1