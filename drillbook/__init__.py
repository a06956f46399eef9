"""Classic programming exercises on arrays, recursion, stacks, brackets, strings, tries and two pointers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "basics",
    "brackets",
    "recursion",
    "stack_algorithms",
    "stacks",
    "strings",
    "tries",
    "two_pointer",
]