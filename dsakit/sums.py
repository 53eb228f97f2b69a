"""Finding pairs, triplets and quadruplets of values with a given sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

__all__ = ["pair_sum", "three_sum", "three_sum_hashing", "four_sum", "sum_of_three"]


def pair_sum(arr: Sequence[int], s: int) -> list[list[int]]:
    """Return every index pair whose values sum to s, as sorted [small, large] lists, sorted."""
    return sorted(sorted(pair) for pair in combinations(arr, 2) if sum(pair) == s)


def three_sum(arr: Iterable[int]) -> list[list[int]]:
    """Return the distinct triplets summing to zero, using sorting and two pointers."""
    values = sorted(arr)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def three_sum_hashing(arr: Sequence[int]) -> list[list[int]]:
    """Return the distinct triplets summing to zero, found with a set per first element."""
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(arr):
        seen: set[int] = set()
        for second in arr[i + 1:]:
            third = -(first + second)
            if third in seen:
                found.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return [list(triplet) for triplet in sorted(found)]


def four_sum(arr: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct quadruplets summing to target, in ascending order."""
    values = sorted(arr)
    n = len(values)
    result: list[list[int]] = []
    if n < 4:
        return result
    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            k, m = j + 1, n - 1
            while k < m:
                total = values[i] + values[j] + values[k] + values[m]
                if total > target:
                    m -= 1
                elif total < target:
                    k += 1
                else:
                    result.append([values[i], values[j], values[k], values[m]])
                    k += 1
                    m -= 1
                    while k < m and values[m] == values[m + 1]:
                        m -= 1
                    while k < m and values[k] == values[k - 1]:
                        k += 1
    return result


def sum_of_three(num: int) -> list[int]:
    """Return three consecutive integers summing to num, or [] if there are none."""
    if num % 3 != 0:
        return []
    middle = num // 3
    return [middle - 1, middle, middle + 1]