"""Bracket exercises: brace reversal cost, redundant parentheses, balanced brackets."""

from __future__ import annotations

OPERATORS = frozenset("+-*/")
PAIRS = {")": "(", "}": "{", "]": "["}
OPENERS = frozenset(PAIRS.values())


def min_brace_reversals(text: str) -> int:
    """Return the fewest brace reversals that balance ``text``.

    Every character other than ``{`` counts as a closing brace. Raises
    ValueError for odd-length input, which can never be balanced.
    """
    if len(text) % 2 == 1:
        raise ValueError("a string of odd length cannot be balanced")
    stack: list[str] = []
    for ch in text:
        if ch == "{":
            stack.append(ch)
        elif stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append(ch)
    opens = stack.count("{")
    closes = len(stack) - opens
    return (closes + 1) // 2 + (opens + 1) // 2


def has_redundant_brackets(expression: str) -> bool:
    """Return True if some pair of parentheses in ``expression`` encloses no operator.

    Raises ValueError when a closing parenthesis has no matching opening one.
    """
    stack: list[str] = []
    for ch in expression:
        if ch == "(" or ch in OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while True:
                if not stack:
                    raise ValueError("unmatched closing parenthesis")
                top = stack.pop()
                if top == "(":
                    break
                redundant = False
            if redundant:
                return True
    return False


def is_valid_parentheses(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket must close the most recent one.
    """
    stack: list[str] = []
    for ch in text:
        if ch in OPENERS:
            stack.append(ch)
        elif not stack or PAIRS.get(ch) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack