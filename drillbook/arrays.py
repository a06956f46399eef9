"""Array exercises: Kadane's maximum subarray, insertion, deletion, search and scans."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("max_subarray_sum() of an empty sequence")
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def insert_at(values: Sequence[int], index: int, value: int) -> list[int]:
    """Return a new list with ``value`` placed at ``index``, later items shifted right."""
    if not 0 <= index <= len(values):
        raise IndexError("insert index out of range")
    return [*values[:index], value, *values[index:]]


def delete_at(values: Sequence[int], index: int) -> list[int]:
    """Return a new list with the item at ``index`` removed, later items shifted left."""
    if not 0 <= index < len(values):
        raise IndexError("delete index out of range")
    return [*values[:index], *values[index + 1:]]


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest items as ``(minimum, maximum)``."""
    if not values:
        raise ValueError("min_max() of an empty sequence")
    return min(values), max(values)


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of all items."""
    return sum(values)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))