"""Stack exercises: histogram areas, nearest smaller values and reshaping stacks.

A stack here is a plain list whose last item is the top.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def _nearest_smaller_indices(
    values: Sequence[int], order: Iterable[int]
) -> list[int | None]:
    """For each index visited in ``order``, find the nearest earlier-visited index
    holding a strictly smaller value, or None."""
    result: list[int | None] = [None] * len(values)
    pending: list[int] = []
    for i in order:
        while pending and values[pending[-1]] >= values[i]:
            pending.pop()
        result[i] = pending[-1] if pending else None
        pending.append(i)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    if not heights:
        raise ValueError("largest_rectangle_area() of an empty histogram")
    n = len(heights)
    following = _nearest_smaller_indices(heights, reversed(range(n)))
    preceding = _nearest_smaller_indices(heights, range(n))
    best = None
    for height, nxt, prev in zip(heights, following, preceding):
        right = n if nxt is None else nxt
        left = -1 if prev is None else prev
        area = height * (right - left - 1)
        if best is None or area > best:
            best = area
    return best


def delete_middle(stack: list[T]) -> None:
    """Remove the middle item of ``stack`` in place.

    The item removed is the one ``len(stack) // 2`` places below the top.
    Raises IndexError on an empty stack.
    """
    if not stack:
        raise IndexError("delete_middle() on an empty stack")
    del stack[len(stack) - 1 - len(stack) // 2]


def push_at_bottom(stack: list[T], value: T) -> None:
    """Place ``value`` beneath every item already on ``stack``."""
    stack.insert(0, value)


def reverse_stack(stack: list[T]) -> None:
    """Reverse the order of ``stack`` in place, so the bottom becomes the top."""
    stack.reverse()


def sort_stack(stack: list[int]) -> None:
    """Sort ``stack`` in place so that the largest item is on top."""
    stack.sort()


def next_smaller_elements(values: Sequence[int]) -> list[int | None]:
    """Return, for each item, the first strictly smaller item after it, or None."""
    indices = _nearest_smaller_indices(values, reversed(range(len(values))))
    return [None if j is None else values[j] for j in indices]


def previous_smaller_elements(values: Sequence[int]) -> list[int | None]:
    """Return, for each item, the nearest strictly smaller item before it, or None."""
    indices = _nearest_smaller_indices(values, range(len(values)))
    return [None if j is None else values[j] for j in indices]


def reverse_with_stack(text: str) -> str:
    """Return ``text`` reversed by pushing its characters and popping them off."""
    pending = list(text)
    return "".join(pending.pop() for _ in range(len(pending)))