"""Two-pointer exercises on sorted sequences: closest triple sum, pair difference, dedup."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def three_sum_closest(values: Sequence[int], target: int) -> int:
    """Return the sum of three items whose total lies closest to ``target``.

    Among equally close sums the first one met by the search is kept.
    Raises ValueError when fewer than three items are given.
    """
    if len(values) < 3:
        raise ValueError("three_sum_closest() needs at least three values")
    ordered = sorted(values)
    closest: int | None = None
    best_gap: int | None = None
    for i, first in enumerate(ordered[:-2]):
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            gap = total - target
            if gap == 0:
                return total
            if best_gap is None or abs(gap) < best_gap:
                best_gap = abs(gap)
                closest = total
            if gap < 0:
                left += 1
            else:
                right -= 1
    return closest  # type: ignore[return-value]


def has_pair_with_difference(values: Sequence[int], difference: int) -> bool:
    """Return True if two items at different positions differ by ``difference``."""
    ordered = sorted(values)
    size = len(ordered)
    left, right = 0, 1
    while right < size and left < size:
        gap = ordered[right] - ordered[left]
        if left != right and gap == difference:
            return True
        if gap < difference:
            right += 1
        else:
            left += 1
    return False


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Return the distinct items of sorted ``values``, keeping their order."""
    return [value for value, _ in groupby(values)]