"""Binary search on the answer: smallest capacities, speeds and days that suffice."""

from __future__ import annotations

from collections.abc import Callable, Sequence

__all__ = ["find_pages", "ship_within_days", "min_eating_speed", "min_days"]


def _lowest_passing(low: int, high: int, passes: Callable[[int], bool]) -> int:
    """Return the smallest value in [low, high] that passes, or high + 1 if none does.

    ``passes`` must be monotone: once true, true for every larger value.
    """
    while low <= high:
        mid = (low + high) // 2
        if passes(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def _parts_needed(items: Sequence[int], limit: int) -> int:
    """Count the contiguous groups needed so that no group's sum exceeds limit."""
    parts, load = 1, 0
    for item in items:
        load += item
        if load > limit:
            parts += 1
            load = item
    return parts


def find_pages(arr: Sequence[int], m: int) -> int:
    """Return the least maximum of pages per student when m students share the books in order.

    Returns -1 when there are more students than books.
    """
    if m > len(arr):
        return -1
    if m < 1:
        raise ValueError(f"number of students must be at least 1, got {m}")
    return _lowest_passing(max(arr), sum(arr), lambda limit: _parts_needed(arr, limit) <= m)


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries the packages in order within days."""
    if not weights:
        raise ValueError("no packages to ship")
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    return _lowest_passing(
        max(weights), sum(weights), lambda capacity: _parts_needed(weights, capacity) <= days
    )


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the least bananas-per-hour speed that finishes all piles within hours.

    If no speed up to the largest pile is enough, one more than the largest pile
    is returned.
    """
    if not piles:
        raise ValueError("no piles to eat")

    def finishes(speed: int) -> bool:
        return sum(-(-pile // speed) for pile in piles) <= hours

    return _lowest_passing(1, max(piles), finishes)


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the least day by which m bouquets of k adjacent bloomed flowers can be made.

    Returns -1 when there are too few flowers.
    """
    if k < 1:
        raise ValueError(f"flowers per bouquet must be at least 1, got {k}")
    if len(bloom_day) < m * k:
        return -1

    def enough_by(day: int) -> bool:
        bouquets = run = 0
        for bloom in bloom_day:
            if bloom <= day:
                run += 1
            else:
                bouquets += run // k
                run = 0
        bouquets += run // k
        return bouquets >= m

    return _lowest_passing(min(bloom_day), max(bloom_day), enough_by)