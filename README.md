# listalgos

Classic algorithms on singly linked lists of integers and on strings.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

`listalgos.linkedlist` provides a `Node` dataclass (`data`, `next`) and
functions that work on chains of nodes. An empty list is represented by
`None`. A `Node` is iterable and yields the values from itself to the end of
the list. On a cyclic list, that iteration never ends.

```python
from listalgos.linkedlist import (
    from_values, to_values, format_list, reverse_list, find_middle,
    has_cycle, make_cyclic, merge_sorted, remove_element,
)

head = from_values([1, 2, 3, 4, 5])
print(format_list(reverse_list(head)))   # 5 -> 4 -> 3 -> 2 -> 1 -> NULL

print(find_middle(from_values([1, 2, 3, 4, 5])).data)   # 3
print(find_middle(from_values([1, 2, 3, 4])).data)      # 3 (second of two middles)

print(has_cycle(make_cyclic([1, 2, 3])))   # True
print(has_cycle(from_values([1, 2, 3])))   # False

merged = merge_sorted(from_values([3, 6, 8]), from_values([4, 7, 9, 11]))
print(to_values(merged))   # [3, 4, 6, 7, 8, 9, 11]

print(to_values(remove_element(from_values([1, 3, 2, 3]), 3)))   # [1, 2]
```

- `from_values(values)` builds a list, returning `None` for no values.
- `to_values(head)` and `format_list(head)` turn a non-cyclic list into a
  Python list or into text ending in ` -> NULL`.
- `reverse_list(head)` and `merge_sorted(list1, list2)` relink the existing
  nodes rather than copying them. `merge_sorted` takes from `list1` first on
  ties.
- `remove_element(head, val)` unlinks every node holding `val`, including
  leading ones, and returns the new head, which may be `None`.
- `find_middle` on an empty list and `make_cyclic` with no values raise
  `ValueError`.

## Palindromes

```python
from listalgos.palindrome import is_palindrome_deque, is_palindrome_stack

is_palindrome_deque("madam")   # True
is_palindrome_stack("abba")    # True
```

`is_palindrome_deque` works on a deque bounded to 100001 characters, so it
does not look at any characters past that point.

## Subsequences

```python
from listalgos.subsequence import is_subsequence_queue, is_subsequence_two_pointers

is_subsequence_queue("abd", "uabqd")          # True
is_subsequence_two_pointers("abd", "uabqd")   # True
```

## Command line

The `listalgos` command runs one algorithm and prints its result:

```
listalgos --help
listalgos reverse 1 2 3 4 5            # 5 -> 4 -> 3 -> 2 -> 1 -> NULL
listalgos middle 1 2 3 4 5             # 3
listalgos remove 3 1 2 3 4 5           # 1 -> 2 -> 4 -> 5 -> NULL
listalgos merge --first 3 6 8 --second 4 7 9 11
listalgos palindrome madam --method stack     # YES
listalgos subsequence abd uabqd --method pointers   # YES
echo "3 1 2 3" | listalgos cycle       # 1
```

- `reverse`, `middle` and `remove` use `1 2 3 4 5` when no values are given.
  `middle` fails if given an empty list.
- `merge` defaults to `--first 3 6 8` and `--second 4 7 9 11`.
- `palindrome` defaults to the text `madam` and `--method deque`.
  `subsequence` defaults to `abd` in `uabqd` and `--method queue`.
- `cycle` reads a count N followed by N whole numbers from standard input. It
  links them into a ring, runs the cycle check, and prints `1` if it finds a
  cycle and `-1` otherwise.

## Limits

Lists hold integers only. The package keeps everything in memory. It does not
read or write list data from files, apart from the numbers `cycle` reads from
standard input.