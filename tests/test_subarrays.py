from hypothesis import given
from hypothesis import strategies as st

from dsakit.subarrays import (
    longest_subarray_with_sum_k,
    longest_subarray_with_sum_k_signed,
    max_profit,
    max_subarray_sum,
    pivot_index,
    pivot_index_prefix,
    total_fruit,
)

non_negative = st.lists(st.integers(min_value=0, max_value=9), max_size=40)
signed = st.lists(st.integers(min_value=-9, max_value=9), max_size=40)


def test_longest_sum_k_example():
    assert longest_subarray_with_sum_k([1, 2, 3, 1, 1, 1, 1], 3) == 3


def test_longest_sum_k_signed_with_zeros():
    assert longest_subarray_with_sum_k_signed([2, 0, 0, 3], 3) == 3


@given(non_negative, st.integers(min_value=0, max_value=60))
def test_both_variants_agree_on_non_negative(values, k):
    assert longest_subarray_with_sum_k(values, k) == longest_subarray_with_sum_k_signed(values, k)


@given(signed, st.integers(-20, 20))
def test_signed_whole_array(values, k):
    result = longest_subarray_with_sum_k_signed(values, k)
    assert 0 <= result <= len(values)
    if values and sum(values) == k:
        assert result == len(values)


def test_max_subarray_sum_examples():
    assert max_subarray_sum([-3, -5, -6]) == 0
    assert max_subarray_sum([1, 2, 7, -4, 3, 2]) == 11


@given(signed)
def test_max_subarray_sum_bounds(values):
    result = max_subarray_sum(values)
    assert result >= 0
    assert result >= sum(values)
    if values:
        assert result >= max(values)
    assert result <= sum(v for v in values if v > 0)


def test_total_fruit_examples():
    assert total_fruit([1, 2, 1]) == 3
    assert total_fruit([3, 3, 3, 1, 2, 1, 1, 2, 3, 3, 4]) == 5


@given(st.lists(st.integers(0, 5), max_size=40))
def test_total_fruit_bounds(fruits):
    result = total_fruit(fruits)
    assert result <= len(fruits)
    if len(set(fruits)) <= 2:
        assert result == len(fruits)
    else:
        assert result >= 2


def test_max_profit_falling_prices():
    assert max_profit([7, 6, 4, 3, 1]) == 0
    assert max_profit([]) == 0


@given(st.lists(st.integers(0, 1000), min_size=1, max_size=30))
def test_max_profit_ascending_is_spread(prices):
    ordered = sorted(prices)
    assert max_profit(ordered) == ordered[-1] - ordered[0]
    assert max_profit(sorted(prices, reverse=True)) == 0


def test_pivot_index_none():
    assert pivot_index([1, 2, 3]) == -1
    assert pivot_index_prefix([1, 2, 3]) == -1


@given(signed)
def test_pivot_variants_agree_and_balance(values):
    index = pivot_index(values)
    assert index == pivot_index_prefix(values)
    if index != -1:
        assert sum(values[:index]) == sum(values[index + 1:])
        for earlier in range(index):
            assert sum(values[:earlier]) != sum(values[earlier + 1:])


def test_pivot_index_source_example():
    nums = [1, 7, 3, 6, 5, 6]
    index = pivot_index(nums)
    assert sum(nums[:index]) == sum(nums[index + 1:])
    assert pivot_index_prefix(nums) == index