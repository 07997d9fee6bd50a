"""Comparison and distribution sorts, plain and hybrid.

Every function returns a new sorted list and leaves its input untouched.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import repeat
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_MERGE_THRESHOLD = 4
DEFAULT_QUICK_THRESHOLD = 5


def is_sorted(values: Iterable[Any]) -> bool:
    """Return True if no element is smaller than the one before it."""
    items = list(values)
    return all(not (b < a) for a, b in zip(items, items[1:]))


def bogo_sort(values: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Shuffle a copy of ``values`` until it happens to be in order."""
    rng = rng or random.Random()
    items = list(values)
    while not is_sorted(items):
        for i in range(len(items) - 1, 0, -1):
            j = rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    _insertion_sort_range(items, 0, len(items) - 1)
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for j in range(len(items) - 1):
        min_idx = j
        for i in range(j + 1, len(items)):
            if items[i] < items[min_idx]:
                min_idx = i
        items[j], items[min_idx] = items[min_idx], items[j]
    return items


def merge_sort(values: Iterable[T]) -> list[T]:
    """Top-down merge sort down to single elements."""
    return hybrid_merge_sort(values, 1)


def hybrid_merge_sort(
    values: Iterable[T], threshold: int = DEFAULT_MERGE_THRESHOLD
) -> list[T]:
    """Merge sort that insertion-sorts runs of at most ``threshold`` elements."""
    if threshold < 1:
        raise ValueError("threshold must be at least 1")
    items = list(values)
    if items:
        _merge_sort(items, 0, len(items) - 1, threshold)
    return items


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with Lomuto partitioning around the last element."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1, 2)
    return items


def hybrid_quick_sort(
    values: Iterable[T], threshold: int = DEFAULT_QUICK_THRESHOLD
) -> list[T]:
    """Quicksort that insertion-sorts ranges shorter than ``threshold``."""
    if threshold < 1:
        raise ValueError("threshold must be at least 1")
    items = list(values)
    _quick_sort(items, 0, len(items) - 1, max(threshold, 2))
    return items


def hoare_quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with Hoare partitioning around the first element."""
    items = list(values)
    lo, hi = 0, len(items) - 1
    stack = [(lo, hi)]
    while stack:
        lo, hi = stack.pop()
        if lo < hi:
            split = _hoare_partition(items, lo, hi)
            stack.append((lo, split))
            stack.append((split + 1, hi))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by counting occurrences across their value range."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    return [
        value
        for offset, count in enumerate(counts)
        for value in repeat(low + offset, count)
    ]


def radix_sort(strings: Iterable[str]) -> list[str]:
    """LSD radix sort of strings by character code.

    Positions past the end of a shorter string sort as code 0, so a prefix
    comes before the strings that extend it.
    """
    items = list(strings)
    if not items:
        return []
    width = max(len(s) for s in items)
    bucket_count = max([256] + [ord(c) + 1 for s in items for c in s])
    for pos in range(width - 1, -1, -1):
        buckets: list[list[str]] = [[] for _ in range(bucket_count)]
        for s in items:
            buckets[ord(s[pos]) if pos < len(s) else 0].append(s)
        items = [s for bucket in buckets for s in bucket]
    return items


def _insertion_sort_range(items: list[Any], lo: int, hi: int) -> None:
    for i in range(lo + 1, hi + 1):
        key = items[i]
        j = i - 1
        while j >= lo and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def _merge(items: list[Any], lo: int, mid: int, hi: int) -> None:
    left = items[lo : mid + 1]
    right = items[mid + 1 : hi + 1]
    li = ri = 0
    for k in range(lo, hi + 1):
        if ri >= len(right) or (li < len(left) and not (right[ri] < left[li])):
            items[k] = left[li]
            li += 1
        else:
            items[k] = right[ri]
            ri += 1


def _merge_sort(items: list[Any], lo: int, hi: int, threshold: int) -> None:
    if hi - lo + 1 > threshold:
        mid = (lo + hi) // 2
        _merge_sort(items, lo, mid, threshold)
        _merge_sort(items, mid + 1, hi, threshold)
        _merge(items, lo, mid, hi)
    else:
        _insertion_sort_range(items, lo, hi)


def _lomuto_partition(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[hi]
    wall = lo - 1
    for j in range(lo, hi):
        if items[j] <= pivot:
            wall += 1
            items[j], items[wall] = items[wall], items[j]
    wall += 1
    items[wall], items[hi] = items[hi], items[wall]
    return wall


def _quick_sort(items: list[Any], lo: int, hi: int, threshold: int) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while hi - lo + 1 >= threshold:
        wall = _lomuto_partition(items, lo, hi)
        if wall - lo < hi - wall:
            _quick_sort(items, lo, wall - 1, threshold)
            lo = wall + 1
        else:
            _quick_sort(items, wall + 1, hi, threshold)
            hi = wall - 1
    if lo < hi:
        _insertion_sort_range(items, lo, hi)


def _hoare_partition(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[lo]
    i = lo - 1
    j = hi + 1
    while True:
        j -= 1
        while items[j] > pivot:
            j -= 1
        i += 1
        while items[i] < pivot:
            i += 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            return j


def _check_sequence(values: Sequence[Any]) -> None:
    if not isinstance(values, Sequence):
        raise TypeError("a sequence is required")