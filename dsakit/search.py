"""Binary-search based lookups over sorted, rotated and mountain arrays."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "binary_search",
    "first_occurrence",
    "last_occurrence",
    "first_and_last_position",
    "floor_and_ceil",
    "floor_sqrt",
    "peak_index_in_mountain",
    "search_insert",
    "search_range",
    "search_rotated",
    "search_rotated_with_duplicates",
]


def binary_search(arr: Sequence[int], key: int) -> int:
    """Return an index of key in the ascending arr, or -1 if it is absent."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == key:
            return mid
        if key > arr[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _occurrence(arr: Sequence[int], key: int, *, leftmost: bool) -> int:
    low, high = 0, len(arr) - 1
    found = -1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == key:
            found = mid
            if leftmost:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return found


def first_occurrence(arr: Sequence[int], key: int) -> int:
    """Return the lowest index of key in the ascending arr, or -1."""
    return _occurrence(arr, key, leftmost=True)


def last_occurrence(arr: Sequence[int], key: int) -> int:
    """Return the highest index of key in the ascending arr, or -1."""
    return _occurrence(arr, key, leftmost=False)


def first_and_last_position(arr: Sequence[int], key: int) -> tuple[int, int]:
    """Return the first and last index of key in the ascending arr, (-1, -1) if absent."""
    return first_occurrence(arr, key), last_occurrence(arr, key)


def floor_and_ceil(arr: Sequence[int], x: int) -> tuple[int, int]:
    """Return the largest value <= x and the smallest value >= x; -1 where none exists."""
    floor = ceil = -1
    for value in arr:
        if value <= x:
            floor = value
        if value >= x:
            ceil = value
            break
    return floor, ceil


def floor_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed n."""
    if n < 0:
        raise ValueError(f"cannot take the square root of a negative number: {n}")
    low, high = 0, n
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square < n and (mid + 1) * (mid + 1) <= n:
            low = mid + 1
        elif square > n:
            high = mid - 1
        else:
            return mid
    return high


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the peak of a strictly rising then falling array."""
    n = len(arr)
    if n == 0:
        raise ValueError("array is empty")
    if n == 1 or arr[0] > arr[1]:
        return 0
    if arr[-1] > arr[-2]:
        return n - 1

    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        rises_into = mid > 0 and arr[mid] > arr[mid - 1]
        falls_after = mid < n - 1 and arr[mid] > arr[mid + 1]
        if rises_into and falls_after:
            return mid
        if mid > 0 and arr[mid - 1] > arr[mid]:
            high = mid - 1
        elif mid < n - 1 and arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            raise ValueError("array is not a mountain: it has a plateau")
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of target in the ascending nums, or where it would be inserted."""
    if not nums or target < nums[0]:
        return 0
    if target > nums[-1]:
        return len(nums)

    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target or (mid > 0 and nums[mid - 1] < target < nums[mid]):
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def search_range(arr: Sequence[int], target: int) -> list[int]:
    """Return [first, last] indices of target in the ascending arr, [-1, -1] if absent.

    The last index is found first; the first index is then sought only in the
    part left of the first hit.
    """
    result = [-1, -1]
    window: tuple[int, int] | None = None

    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            if window is None:
                window = (low, mid - 1)
                result[0] = mid
            result[1] = mid
            low = mid + 1
        elif target > arr[mid]:
            low = mid + 1
        else:
            high = mid - 1

    if window is not None:
        low, high = window
        while low <= high:
            mid = (low + high) // 2
            if arr[mid] == target:
                result[0] = mid
                high = mid - 1
            elif target > arr[mid]:
                low = mid + 1
            else:
                high = mid - 1

    return result


def search_rotated(arr: Sequence[int], target: int) -> int:
    """Return the index of target in a rotated ascending array of distinct values, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= target <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= target <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(arr: Sequence[int], target: int) -> bool:
    """Tell whether target occurs in a rotated ascending array that may hold duplicates."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            return True
        if arr[low] == arr[mid] == arr[high]:
            low += 1
            high -= 1
        elif arr[low] <= arr[mid]:
            if arr[low] <= target <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= target <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False