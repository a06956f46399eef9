"""Stacks built three ways: on a fixed array, on linked nodes, and two sharing one array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class ArrayStack(Generic[T]):
    """A stack with a fixed capacity, stored in a preallocated list."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("stack size must be non-negative")
        self._items: list[T | None] = [None] * size
        self._top = -1

    @property
    def capacity(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return self._top + 1

    def push(self, value: T) -> None:
        """Push ``value``; raises StackOverflowError when the stack is full."""
        if self._top + 1 >= len(self._items):
            raise StackOverflowError("Stack overflow")
        self._top += 1
        self._items[self._top] = value

    def pop(self) -> T:
        """Remove and return the top value; raises StackUnderflowError when empty."""
        if self._top < 0:
            raise StackUnderflowError("Stack underflow")
        value = self._items[self._top]
        self._items[self._top] = None
        self._top -= 1
        return value  # type: ignore[return-value]

    def peek(self) -> T:
        """Return the top value without removing it; raises StackUnderflowError when empty."""
        if self._top < 0:
            raise StackUnderflowError("stack is empty")
        return self._items[self._top]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._top == -1


@dataclass
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedStack(Generic[T]):
    """An unbounded stack kept as a chain of nodes."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def push(self, value: T) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value; raises StackUnderflowError when empty."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._top is None


class TwoStack(Generic[T]):
    """Two stacks sharing one array: the first grows from the left, the second from the right."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("stack size must be non-negative")
        self._items: list[T | None] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top2 - self._top1 > 1

    def push1(self, value: T) -> None:
        """Push onto the first stack; raises StackOverflowError when the array is full."""
        if not self._has_room():
            raise StackOverflowError("no room left in the shared array")
        self._top1 += 1
        self._items[self._top1] = value

    def push2(self, value: T) -> None:
        """Push onto the second stack; raises StackOverflowError when the array is full."""
        if not self._has_room():
            raise StackOverflowError("no room left in the shared array")
        self._top2 -= 1
        self._items[self._top2] = value

    def pop1(self) -> T:
        """Pop from the first stack; raises StackUnderflowError when it is empty."""
        if self._top1 < 0:
            raise StackUnderflowError("stack 1 is empty")
        value = self._items[self._top1]
        self._items[self._top1] = None
        self._top1 -= 1
        return value  # type: ignore[return-value]

    def pop2(self) -> T:
        """Pop from the second stack; raises StackUnderflowError when it is empty."""
        if self._top2 >= len(self._items):
            raise StackUnderflowError("stack 2 is empty")
        value = self._items[self._top2]
        self._items[self._top2] = None
        self._top2 += 1
        return value  # type: ignore[return-value]