import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.minimize import find_pages, min_days, min_eating_speed, ship_within_days

positive_lists = st.lists(st.integers(1, 100), min_size=1, max_size=20)


def test_find_pages_source_example():
    assert find_pages([12, 34, 67, 90], 2) == 113


def test_find_pages_more_students_than_books():
    assert find_pages([12, 34, 67, 90], 5) == -1


def test_find_pages_zero_students_raises():
    with pytest.raises(ValueError):
        find_pages([12, 34], 0)


@given(positive_lists)
def test_find_pages_extremes(arr):
    assert find_pages(arr, 1) == sum(arr)
    assert find_pages(arr, len(arr)) == max(arr)


@given(positive_lists, st.integers(1, 20))
def test_find_pages_bounds_and_monotone(arr, m):
    result = find_pages(arr, m)
    if m > len(arr):
        assert result == -1
        return_value_checked = True
    else:
        assert max(arr) <= result <= sum(arr)
        if m < len(arr):
            assert find_pages(arr, m + 1) <= result
        return_value_checked = True
    assert return_value_checked


def test_ship_within_days_source_example():
    assert ship_within_days([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 5) == 15


@given(positive_lists)
def test_ship_within_days_extremes(weights):
    assert ship_within_days(weights, 1) == sum(weights)
    assert ship_within_days(weights, len(weights)) == max(weights)
    assert ship_within_days(weights, len(weights) + 3) == max(weights)


@given(positive_lists, st.integers(1, 20))
def test_ship_within_days_monotone(weights, days):
    capacity = ship_within_days(weights, days)
    assert max(weights) <= capacity <= sum(weights)
    assert ship_within_days(weights, days + 1) <= capacity


def test_ship_within_days_rejects_bad_input():
    with pytest.raises(ValueError):
        ship_within_days([1, 2], 0)
    with pytest.raises(ValueError):
        ship_within_days([], 3)


def test_min_eating_speed_source_examples():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, 5) == 30
    assert min_eating_speed(piles, 6) == 23
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


@given(positive_lists)
def test_min_eating_speed_extremes(piles):
    assert min_eating_speed(piles, len(piles)) == max(piles)
    assert min_eating_speed(piles, sum(piles)) == 1


@given(positive_lists, st.integers(0, 30))
def test_min_eating_speed_monotone(piles, extra):
    hours = len(piles) + extra
    speed = min_eating_speed(piles, hours)
    assert 1 <= speed <= max(piles)
    assert min_eating_speed(piles, hours + 1) <= speed


def test_min_eating_speed_impossible_returns_one_past_max():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, 2) == max(piles) + 1


def test_min_eating_speed_empty_raises():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)


def test_min_days_source_examples():
    assert min_days([7, 7, 7, 7, 12, 7, 7], 2, 3) == 12
    assert min_days([1, 10, 3, 10, 2], 3, 2) == -1
    assert min_days([1, 10, 3, 10, 2], 3, 1) == 3


def test_min_days_answer_at_lowest_day():
    assert min_days([1, 3], 1, 1) == 1


@given(positive_lists)
def test_min_days_extremes(bloom_day):
    assert min_days(bloom_day, 1, 1) == min(bloom_day)
    assert min_days(bloom_day, len(bloom_day), 1) == max(bloom_day)
    assert min_days(bloom_day, 1, len(bloom_day)) == max(bloom_day)


@given(positive_lists, st.integers(1, 5), st.integers(1, 5))
def test_min_days_result_is_a_bloom_day(bloom_day, m, k):
    result = min_days(bloom_day, m, k)
    if m * k > len(bloom_day):
        assert result == -1
    else:
        assert result in bloom_day


def test_min_days_zero_bouquet_size_raises():
    with pytest.raises(ValueError):
        min_days([1, 2, 3], 1, 0)