"""Searching routines: binary search and maximum finding."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def binary_search(values: Sequence[Any], target: Any) -> bool:
    """Return True if ``target`` occurs in the ascending sequence ``values``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if target == values[mid]:
            return True
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def maximum(values: Sequence[T]) -> T:
    """Return the largest value by a single linear scan."""
    if not values:
        raise ValueError("maximum of an empty sequence")
    iterator = iter(values)
    best = next(iterator)
    for value in iterator:
        if value > best:
            best = value
    return best


def bogo_max(values: Sequence[T], rng: random.Random | None = None) -> T:
    """Find the maximum by swapping random elements to the front until it is there.

    Works on a copy of ``values``; ``rng`` supplies the random positions.
    """
    if not values:
        raise ValueError("maximum of an empty sequence")
    rng = rng or random.Random()
    items = list(values)
    while any(item > items[0] for item in items[1:]):
        j = rng.randint(1, len(items) - 1)
        items[0], items[j] = items[j], items[0]
    return items[0]