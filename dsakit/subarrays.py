"""Sliding-window and prefix-sum algorithms over contiguous runs of an array."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

__all__ = [
    "longest_subarray_with_sum_k",
    "longest_subarray_with_sum_k_signed",
    "max_subarray_sum",
    "total_fruit",
    "max_profit",
    "pivot_index",
    "pivot_index_prefix",
]


def longest_subarray_with_sum_k(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to k; values must be non-negative."""
    left = total = best = 0
    for right, value in enumerate(arr):
        total += value
        while left <= right and total > k:
            total -= arr[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def longest_subarray_with_sum_k_signed(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to k; values may be negative."""
    first_index = {0: -1}
    total = best = 0
    for i, value in enumerate(arr):
        total += value
        start = first_index.get(total - k)
        if start is not None:
            best = max(best, i - start)
        first_index.setdefault(total, i)
    return best


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Return the largest sum of a run; the empty run counts, so the result is at least 0."""
    total = best = 0
    for value in arr:
        total += value
        best = max(best, total)
        if total < 0:
            total = 0
    return best


def total_fruit(fruits: Sequence[int]) -> int:
    """Return the length of the longest run holding at most two distinct values."""
    counts: Counter[int] = Counter()
    left = best = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        if len(counts) > 2:
            counts[fruits[left]] -= 1
            if counts[fruits[left]] == 0:
                del counts[fruits[left]]
            left += 1
        best = max(best, right - left + 1)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1 (quadratic)."""
    for i in range(len(nums)):
        if sum(nums[:i]) == sum(nums[i + 1:]):
            return i
    return -1


def pivot_index_prefix(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1 (linear)."""
    right = sum(nums)
    left = 0
    for i, value in enumerate(nums):
        right -= value
        if left == right:
            return i
        left += value
    return -1