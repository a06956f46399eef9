# drillbook

A small library of classic programming exercises, each written as a plain
Python function or class: number and text basics, array scans, recursion,
stacks, bracket checking, string clean-ups, prefix trees and two-pointer
searches. Useful for study, interview practice, or as reference answers.

## Installation

```
pip install drillbook
```

It needs Python 3.10 or newer and has no runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `drillbook.basics` | `add`, `Calculator` (`add`, `subtract`, `multiply`, `divide`), `is_prime`, `digit_sum`, `is_vowel`, `reverse_string`, `is_palindrome` |
| `drillbook.arrays` | `max_subarray_sum` (Kadane), `insert_at`, `delete_at`, `linear_search`, `min_max`, `array_sum`, `is_sorted` |
| `drillbook.recursion` | `sum_natural`, `factorial`, `fibonacci`, `count_range`, `power`, `binary_search`, `count_digits`, `is_palindrome_phrase`, `find_subset_sum`, `subsets` |
| `drillbook.stacks` | `ArrayStack`, `LinkedStack`, `TwoStack`, `StackOverflowError`, `StackUnderflowError` |
| `drillbook.brackets` | `min_brace_reversals`, `has_redundant_brackets`, `is_valid_parentheses` |
| `drillbook.stack_algorithms` | `largest_rectangle_area`, `delete_middle`, `push_at_bottom`, `reverse_stack`, `sort_stack`, `next_smaller_elements`, `previous_smaller_elements`, `reverse_with_stack` |
| `drillbook.strings` | `reverse_words`, `max_occurring_char`, `is_alnum_palindrome`, `check_inclusion`, `remove_adjacent_duplicates`, `remove_occurrences`, `remove_consecutive_runs`, `replace_spaces`, `reverse`, `compress` |
| `drillbook.tries` | `Trie` (`insert`, `search`, `remove`, `suggestions`, `in`), `phone_directory` |
| `drillbook.two_pointer` | `three_sum_closest`, `has_pair_with_difference`, `remove_duplicates` |

Functions in `drillbook.arrays` return new lists and leave their input alone.
The functions in `drillbook.stack_algorithms` that reshape a stack
(`delete_middle`, `push_at_bottom`, `reverse_stack`, `sort_stack`) take a plain
list whose last item is the top, and change it in place.

## Examples

```python
from drillbook.arrays import max_subarray_sum
from drillbook.brackets import is_valid_parentheses
from drillbook.stack_algorithms import largest_rectangle_area, next_smaller_elements
from drillbook.tries import phone_directory
from drillbook.two_pointer import three_sum_closest

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
is_valid_parentheses("{[()]}")                      # True
largest_rectangle_area([2, 1, 5, 6, 2, 3])          # 10
next_smaller_elements([4, 8, 5, 2, 25])             # [2, 5, 2, None, None]
three_sum_closest([-1, 2, 1, -4], 1)                # 2
phone_directory(["apple", "app", "banana", "cherry"], "app")  # ['app', 'apple']
```

`Trie.suggestions` follows the query as far as the stored words allow and
returns every word below that point in lexicographic order, so a query whose
first character matches nothing yields every stored word. `Trie.remove`
returns whether the word was present and prunes nodes no other word needs.

Errors are raised rather than signalled with sentinel values. The stack
classes raise `StackOverflowError` when full and `StackUnderflowError` when
empty:

```python
from drillbook.stacks import ArrayStack, StackUnderflowError

stack = ArrayStack(2)
stack.push(1)
stack.pop()
try:
    stack.pop()
except StackUnderflowError:
    print("nothing left to pop")
```

Likewise `Calculator.divide` and `power` raise `ZeroDivisionError`,
`min_brace_reversals` raises `ValueError` for odd-length input, and lookups
such as `linear_search` and `binary_search` return `None` when nothing is found.

## What it does not do

drillbook is a library only. It has no command-line program and does not read
input interactively; call the functions from your own code.

## Running the tests

```
pip install "drillbook[test]"
pytest
```