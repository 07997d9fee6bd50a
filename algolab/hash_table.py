"""A hash table that resolves collisions by separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 101
LOAD_FACTOR = 0.5

_MASK_64 = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(number: int) -> int:
    """Return the smallest prime not below ``number``, with 2 giving 3."""
    if number <= 1:
        return 2
    if number == 2:
        return 3
    if number % 2 == 0:
        number += 1
    while not is_prime(number):
        number += 2
    return number


def int_key_hash(key: int) -> int:
    """djb2 hash over the four little-endian bytes of a 32-bit integer."""
    result = 5381
    for byte in (key & 0xFFFFFFFF).to_bytes(4, "little"):
        result = (result * 33 + byte) & _MASK_64
    return result


def _string_hash(key: str) -> int:
    result = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        result = ((result ^ byte) * _FNV_PRIME) & _MASK_64
    return result


def key_hash(key: int | str) -> int:
    """Hash an integer or string key to a non-negative 64-bit value."""
    if isinstance(key, int):
        return int_key_hash(key)
    if isinstance(key, str):
        return _string_hash(key)
    raise TypeError(f"unsupported key type: {type(key).__name__}")


class HashTable(Generic[K, V]):
    """Mapping from int or str keys to values, stored in chained buckets.

    The table grows to the next prime above twice its capacity once more than
    half of its capacity is filled.
    """

    def __init__(self, size: int | None = None) -> None:
        capacity = DEFAULT_CAPACITY if size is None else next_prime(size)
        self._table: list[list[list[Any]]] = [[] for _ in range(capacity)]
        self._filled = 0

    def __getitem__(self, key: K) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: K) -> None:
        if not self._discard(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (int, str)):
            return False
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._filled

    def __iter__(self) -> Iterator[K]:
        for bucket in self._table:
            for key, _ in bucket:
                yield key

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs bucket by bucket."""
        for bucket in self._table:
            for key, value in bucket:
                yield key, value

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        entry = self._find(key)
        if entry is not None:
            entry[1] = value
            return
        if self._filled / len(self._table) > LOAD_FACTOR:
            self._resize()
        self._table[self._index(key)].append([key, value])
        self._filled += 1

    def remove(self, key: K) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        self._discard(key)

    def empty(self) -> bool:
        return self._filled == 0

    def capacity(self) -> int:
        """Return the number of buckets."""
        return len(self._table)

    def clear(self) -> None:
        """Remove every entry while keeping the current capacity."""
        for bucket in self._table:
            bucket.clear()
        self._filled = 0

    def copy(self) -> HashTable[K, V]:
        """Return an independent table with the same capacity and entries."""
        clone: HashTable[K, V] = type(self)()
        clone._table = [[[k, v] for k, v in bucket] for bucket in self._table]
        clone._filled = self._filled
        return clone

    def buckets(self) -> list[list[tuple[K, V]]]:
        """Return a snapshot of every bucket as a list of pairs."""
        return [[(k, v) for k, v in bucket] for bucket in self._table]

    def render(self) -> str:
        """Return a text listing of every bucket and its pairs."""
        lines = [
            f"Bucket {i}: " + "".join(f"({k}, {v}) " for k, v in bucket)
            for i, bucket in enumerate(self._table)
        ]
        return "\n".join(lines) + "\n\n\n"

    def _index(self, key: K) -> int:
        return key_hash(key) % len(self._table)  # type: ignore[arg-type]

    def _find(self, key: K) -> list[Any] | None:
        for entry in self._table[self._index(key)]:
            if entry[0] == key:
                return entry
        return None

    def _discard(self, key: K) -> bool:
        bucket = self._table[self._index(key)]
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._filled -= 1
                return True
        return False

    def _resize(self) -> None:
        old = self._table
        self._table = [[] for _ in range(next_prime(2 * len(old)))]
        for bucket in old:
            for entry in bucket:
                self._table[self._index(entry[0])].append(entry)