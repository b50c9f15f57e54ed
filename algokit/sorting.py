"""Classic sorting algorithms and a distinct-value counter.

Every sort returns a new ascending list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

__all__ = [
    "counting_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "count_distinct",
]


def _integers(values: Iterable[Any]) -> list[int]:
    items = list(values)
    for item in items:
        if not isinstance(item, int) or isinstance(item, bool):
            raise TypeError(f"expected integers, got {item!r}")
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers, negative ones included, by counting occurrences."""
    items = _integers(values)
    if not items:
        return []
    low = min(0, min(items))
    high = max(items)
    counts = [0] * (high - low + 1)
    for item in items:
        counts[item - low] += 1
    return [
        offset + low
        for offset, count in enumerate(counts)
        for _ in range(count)
    ]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by growing a sorted prefix one element at a time."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the smallest remaining element forward."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], lower: int, upper: int) -> int:
    """Partition around the first element and return its final index."""
    pivot = items[lower]
    start, finish = lower, upper
    while start < finish:
        while items[start] <= pivot:
            start += 1
            if start == upper:
                break
        while items[finish] > pivot:
            finish -= 1
            if finish == lower:
                break
        if start < finish:
            items[start], items[finish] = items[finish], items[start]
    items[finish], items[lower] = items[lower], items[finish]
    return finish


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lower, upper = pending.pop()
        if lower < upper:
            position = _partition(items, lower, upper)
            pending.append((lower, position - 1))
            pending.append((position + 1, upper))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = _integers(values)
    if any(item < 0 for item in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return []
    largest = max(items)
    exponent = 1
    while largest // exponent > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for item in items:
            buckets[(item // exponent) % 10].append(item)
        items = [item for bucket in buckets for item in bucket]
        exponent *= 10
    return items


def count_distinct(values: Iterable[Hashable]) -> int:
    """Number of different values."""
    return len(set(values))