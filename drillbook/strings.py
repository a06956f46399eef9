"""String exercises: reversals, character counts, permutations and clean-ups."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby
from string import ascii_lowercase


def reverse_words(text: str) -> str:
    """Reverse the characters of every space-separated word, keeping word order."""
    return " ".join(word[::-1] for word in text.split(" "))


def max_occurring_char(text: str) -> str:
    """Return the lowercase letter that occurs most often in ``text``.

    Ties go to the letter earliest in the alphabet; an empty string gives ``"a"``.
    Raises ValueError if ``text`` holds anything but the letters a to z.
    """
    stray = next((ch for ch in text if ch not in ascii_lowercase), None)
    if stray is not None:
        raise ValueError(f"expected only lowercase letters a-z, got {stray!r}")
    counts = Counter(text)
    best, best_count = "a", 0
    for letter in ascii_lowercase:
        if counts[letter] > best_count:
            best, best_count = letter, counts[letter]
    return best


def is_alnum_palindrome(text: str) -> bool:
    """Return True if the ASCII letters and digits of ``text`` read the same both ways,
    ignoring case."""
    cleaned = [ch.lower() for ch in text if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def check_inclusion(pattern: str, text: str) -> bool:
    """Return True if some permutation of ``pattern`` is a contiguous part of ``text``."""
    width = len(pattern)
    if width > len(text):
        return False
    wanted = Counter(pattern)
    window = Counter(text[:width])
    if window == wanted:
        return True
    for outgoing, incoming in zip(text, text[width:]):
        window[incoming] += 1
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        if window == wanted:
            return True
    return False


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly cancel pairs of equal adjacent characters and return what is left."""
    kept: list[str] = []
    for ch in text:
        if kept and kept[-1] == ch:
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def remove_occurrences(text: str, part: str) -> str:
    """Remove the leftmost occurrence of ``part`` from ``text`` until none is left.

    Raises ValueError when ``part`` is empty.
    """
    if not part:
        raise ValueError("the part to remove must not be empty")
    while part in text:
        start = text.index(part)
        text = text[:start] + text[start + len(part):]
    return text


def remove_consecutive_runs(text: str, run_length: int) -> str:
    """Drop every run of identical characters whose length is exactly ``run_length``."""
    runs = ("".join(group) for _, group in groupby(text))
    return "".join(run for run in runs if len(run) != run_length)


def replace_spaces(text: str) -> str:
    """Replace every space in ``text`` with ``%20``."""
    return text.replace(" ", "%20")


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def compress(items: Iterable[str]) -> list[tuple[str, int]]:
    """Count each distinct item and return ``(item, count)`` pairs in sorted item order."""
    return sorted(Counter(items).items())