"""Array utilities: unions, frequency queries, rearrangements and rotations."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "sorted_union",
    "majority_elements",
    "longest_consecutive",
    "pascals_triangle",
    "rearrange_by_sign",
    "product_except_self",
    "rotate",
    "single_number",
]


def sorted_union(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Return the distinct values found in either input, in ascending order."""
    return sorted(set(a) | set(b))


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than len(nums) // 3 times, in order of first appearance."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def pascals_triangle(num_rows: int) -> list[list[int]]:
    """Return the first num_rows rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError(f"number of rows must be at least 1, got {num_rows}")
    rows = [[1]]
    for _ in range(num_rows - 1):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def rearrange_by_sign(nums: Iterable[int]) -> list[int]:
    """Interleave non-negative and negative values, starting with a non-negative one.

    The relative order within each sign is kept. Both signs must occur equally often.
    """
    values = list(nums)
    positives = [value for value in values if value >= 0]
    negatives = [value for value in values if value < 0]
    if len(positives) != len(negatives):
        raise ValueError(
            f"need as many non-negative as negative values, "
            f"got {len(positives)} and {len(negatives)}"
        )
    return [value for pair in zip(positives, negatives) for value in pair]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    zeros = sum(1 for value in nums if value == 0)
    product = math.prod(value for value in nums if value != 0)
    if zeros == 0:
        return [product // value for value in nums]
    if zeros == 1:
        return [product if value == 0 else 0 for value in nums]
    return [0] * len(nums)


def rotate(arr: list[int], k: int) -> None:
    """Rotate the list in place k steps to the right."""
    if not arr:
        return
    k %= len(arr)
    arr[:] = arr[len(arr) - k:] + arr[:len(arr) - k]


def single_number(nums: Iterable[int]) -> int:
    """Return the first value occurring exactly once, or -1 if every value repeats."""
    return next((value for value, count in Counter(nums).items() if count == 1), -1)