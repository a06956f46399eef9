"""Small number and text exercises: sums, a calculator, primes, digits, vowels."""

from __future__ import annotations

VOWELS = frozenset("aeiou")


def add(a, b):
    """Return the sum of two numbers."""
    return a + b


class Calculator:
    """A four-function calculator working on floating-point numbers."""

    def add(self, a, b):
        return float(a) + float(b)

    def subtract(self, a, b):
        return float(a) - float(b)

    def multiply(self, a, b):
        return float(a) * float(b)

    def divide(self, a, b):
        """Divide ``a`` by ``b``; raises ZeroDivisionError when ``b`` is zero."""
        if b == 0:
            raise ZeroDivisionError("division by zero")
        return float(a) / float(b)


def is_prime(number: int) -> bool:
    """Return True if ``number`` is prime, by trial division up to its square root."""
    if number <= 1:
        return False
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("number is not positive")
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def is_vowel(ch: str) -> bool:
    """Return True if the single character ``ch`` is a vowel, ignoring case."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    return ch.lower() in VOWELS


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards, exactly."""
    return text == text[::-1]