from itertools import combinations, permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from drillbook.two_pointer import (
    has_pair_with_difference,
    remove_duplicates,
    three_sum_closest,
)

SMALL_INTS = st.integers(min_value=-50, max_value=50)


def test_three_sum_closest_worked_example():
    assert three_sum_closest([-1, 2, 1, -4], 1) == 2


def test_three_sum_closest_exact_hit():
    values = [1, 4, 6, 10]
    assert three_sum_closest(values, 1 + 4 + 10) == 15


def test_three_sum_closest_leaves_input_untouched():
    values = [-1, 2, 1, -4]
    three_sum_closest(values, 1)
    assert values == [-1, 2, 1, -4]


def test_three_sum_closest_needs_three_values():
    with pytest.raises(ValueError):
        three_sum_closest([1, 2], 3)


@given(st.lists(SMALL_INTS, min_size=3, max_size=8), SMALL_INTS)
def test_three_sum_closest_is_optimal(values, target):
    result = three_sum_closest(values, target)
    sums = {sum(triple) for triple in combinations(values, 3)}
    assert result in sums
    assert all(abs(result - target) <= abs(s - target) for s in sums)


def test_pair_with_difference_worked_example():
    assert has_pair_with_difference([2, 3, 5, 8, 10], 2) is True


def test_pair_with_difference_absent():
    assert has_pair_with_difference([2, 3, 5, 8, 10], 4) is False


def test_pair_with_zero_difference_needs_duplicate():
    assert has_pair_with_difference([1, 2, 3], 0) is False
    assert has_pair_with_difference([1, 2, 2, 3], 0) is True


def test_pair_with_difference_on_short_input():
    assert has_pair_with_difference([], 1) is False
    assert has_pair_with_difference([7], 0) is False


@given(st.lists(SMALL_INTS, max_size=10), st.integers(min_value=0, max_value=60))
def test_pair_with_difference_matches_existence(values, difference):
    exists = any(b - a == difference for a, b in permutations(values, 2))
    assert has_pair_with_difference(values, difference) is exists


def test_remove_duplicates_worked_example():
    assert remove_duplicates([1, 1, 2, 2, 2, 3, 4, 5, 5, 5]) == [1, 2, 3, 4, 5]


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == []


@given(st.lists(SMALL_INTS, max_size=20))
def test_remove_duplicates_on_sorted_input(values):
    ordered = sorted(values)
    result = remove_duplicates(ordered)
    assert result == sorted(set(values))
    assert len(result) == len(set(values))
    assert remove_duplicates(result) == result