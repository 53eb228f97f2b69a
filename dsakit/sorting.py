"""Comparison sorts, inversion counting, three-way partitioning and interval merging."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Sequence

__all__ = [
    "merge_sort",
    "quick_sort",
    "count_inversions",
    "reverse_pairs",
    "sort_colors",
    "merge_intervals",
]


def _cross_count(
    left: Sequence[int], right: Sequence[int], pred: Callable[[int, int], bool]
) -> int:
    """Count pairs (a from left, b from right) with pred(a, b); both halves ascending."""
    count = j = 0
    for a in left:
        while j < len(right) and pred(a, right[j]):
            j += 1
        count += j
    return count


def _sort_counting(items: list[int], pred: Callable[[int, int], bool]) -> tuple[list[int], int]:
    """Merge sort items, counting pairs i < j with pred(items[i], items[j])."""
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_counting(items[:mid], pred)
    right, right_count = _sort_counting(items[mid:], pred)
    cross = _cross_count(left, right, pred)
    return list(heapq.merge(left, right)), left_count + right_count + cross


def merge_sort(arr: Iterable[int]) -> list[int]:
    """Return the values in ascending order using merge sort."""
    ordered, _ = _sort_counting(list(arr), lambda a, b: False)
    return ordered


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i < high:
            i += 1
        while items[j] > pivot and j > low:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(arr: Iterable[int]) -> list[int]:
    """Return the values in ascending order using quicksort with the first element as pivot."""
    items = list(arr)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def count_inversions(arr: Iterable[int]) -> int:
    """Count the pairs i < j with arr[i] > arr[j]."""
    _, count = _sort_counting(list(arr), lambda a, b: a > b)
    return count


def reverse_pairs(arr: Iterable[int]) -> int:
    """Count the pairs i < j with arr[i] > 2 * arr[j]."""
    _, count = _sort_counting(list(arr), lambda a, b: a > 2 * b)
    return count


def sort_colors(arr: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass (Dutch national flag)."""
    low, mid, high = 0, 0, len(arr) - 1
    while mid <= high:
        if arr[mid] == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif arr[mid] == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching [start, end] intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged