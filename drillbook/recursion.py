"""Recursion exercises: series, powers, search, digits, palindromes and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def sum_natural(n: int) -> int:
    """Return the sum of the first ``n`` natural numbers."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n * (n + 1) // 2


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def count_range(start: int, end: int) -> list[int]:
    """Return the integers from ``start`` to ``end`` inclusive, in increasing order."""
    return list(range(start, end + 1))


def power(base: float, exponent: int) -> float:
    """Return ``base`` raised to the integer ``exponent`` by repeated multiplication."""
    result = 1.0
    for _ in range(abs(exponent)):
        result *= base
    if exponent >= 0:
        return result
    if result == 0:
        raise ZeroDivisionError("zero cannot be raised to a negative power")
    return 1 / result


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return None


def count_digits(n: int) -> int:
    """Return the number of decimal digits in a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = 1
    while n >= 10:
        n //= 10
        digits += 1
    return digits


def is_palindrome_phrase(text: str) -> bool:
    """Return True if the ASCII letters and digits of ``text`` form a palindrome, ignoring case."""
    cleaned = "".join(c.lower() for c in text if c.isascii() and c.isalnum())
    return cleaned == cleaned[::-1]


def find_subset_sum(values: Sequence[int], target: int) -> list[int] | None:
    """Return the first subset (in include-first search order) summing to ``target``, or None."""
    chosen: list[int] = []

    def search(index: int, total: int) -> bool:
        if total == target:
            return True
        if index >= len(values):
            return False
        chosen.append(values[index])
        if search(index + 1, total + values[index]):
            return True
        chosen.pop()
        return search(index + 1, total)

    return list(chosen) if search(0, 0) else None


def subsets(values: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``values``, exploring inclusion before exclusion."""

    def walk(index: int, prefix: list[int]) -> Iterator[list[int]]:
        if index == len(values):
            yield list(prefix)
            return
        prefix.append(values[index])
        yield from walk(index + 1, prefix)
        prefix.pop()
        yield from walk(index + 1, prefix)

    return list(walk(0, []))