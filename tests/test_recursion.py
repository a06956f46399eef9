import pytest
from hypothesis import given, strategies as st

from drillbook.recursion import (
    binary_search,
    count_digits,
    count_range,
    factorial,
    fibonacci,
    find_subset_sum,
    is_palindrome_phrase,
    power,
    subsets,
    sum_natural,
)


def test_sum_natural_base_cases():
    assert sum_natural(0) == 0
    assert sum_natural(1) == 1


@given(st.integers(1, 10_000))
def test_sum_natural_step(n):
    assert sum_natural(n) == sum_natural(n - 1) + n


def test_sum_natural_negative_raises():
    with pytest.raises(ValueError):
        sum_natural(-1)


def test_factorial_base_cases():
    assert factorial(0) == factorial(1)
    assert factorial(1) == 1


@given(st.integers(1, 200))
def test_factorial_step(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-3)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci(2) == fibonacci(1)


@given(st.integers(2, 300))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


@given(st.integers(-100, 100), st.integers(0, 50))
def test_count_range_shape(start, span):
    end = start + span
    numbers = count_range(start, end)
    assert len(numbers) == span + 1
    assert numbers[0] == start
    assert numbers[-1] == end
    assert all(b - a == 1 for a, b in zip(numbers, numbers[1:]))


def test_count_range_empty_when_start_after_end():
    assert count_range(5, 3) == []


def test_power_example():
    assert power(2, 10) == 1024.0


@given(st.floats(0.5, 4.0), st.integers(0, 20))
def test_power_negative_is_reciprocal(base, exponent):
    assert power(base, -exponent) * power(base, exponent) == pytest.approx(1.0)


@given(st.floats(-100, 100))
def test_power_zero_exponent(base):
    assert power(base, 0) == 1.0


def test_power_zero_to_negative_raises():
    with pytest.raises(ZeroDivisionError):
        power(0.0, -1)


SORTED = [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_each_item(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("target", [1, 7, 21, -4])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


@given(st.integers(0, 10**30))
def test_count_digits_matches_decimal_text(n):
    assert count_digits(n) == len(str(n))


def test_count_digits_negative_raises():
    with pytest.raises(ValueError):
        count_digits(-12)


@pytest.mark.parametrize(
    "text", ["A man, a plan, a canal, Panama!", "", "No 'x' in Nixon", "12321"]
)
def test_palindrome_phrases(text):
    assert is_palindrome_phrase(text) is True


@pytest.mark.parametrize("text", ["hello", "ab, c", "123"])
def test_non_palindrome_phrases(text):
    assert is_palindrome_phrase(text) is False


def test_find_subset_sum_example():
    assert find_subset_sum([3, 34, 4, 12, 5, 2], 9) == [3, 4, 2]


def test_find_subset_sum_none_when_impossible():
    assert find_subset_sum([3, 34, 4, 12, 5, 2], 1) is None


def test_find_subset_sum_zero_target_is_empty():
    assert find_subset_sum([3, 4], 0) == []


@given(st.lists(st.integers(1, 30), max_size=10), st.integers(0, 100))
def test_find_subset_sum_result_is_valid(values, target):
    found = find_subset_sum(values, target)
    if found is not None:
        assert sum(found) == target
        remaining = iter(values)
        assert all(item in remaining for item in found)
    else:
        assert target not in {sum(s) for s in subsets(values)}


def test_subsets_order():
    assert subsets([1, 2, 3]) == [
        [1, 2, 3],
        [1, 2],
        [1, 3],
        [1],
        [2, 3],
        [2],
        [3],
        [],
    ]


@given(st.lists(st.integers(), max_size=8, unique=True))
def test_subsets_count_and_uniqueness(values):
    result = subsets(values)
    assert len(result) == 2 ** len(values)
    assert len({tuple(s) for s in result}) == len(result)
    assert result[0] == list(values)
    assert result[-1] == []