# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of allowed operations. It prints the operations, one per line, that turn
the input into ascending order on stack `a` (top of the stack first).

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the first two elements of `a`                  |
| `pb`  | move the top of `a` onto `b`                        |
| `pa`  | move the top of `b` onto `a`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

Three values or fewer are sorted directly on `a`. Larger inputs are moved to
`b` one at a time, each time choosing the value that needs the fewest
rotations to land in its place, and are then pushed back onto `a`.

## Command line

Install the package, then run:

```
push-swap 3 2 1
```

This prints:

```
ra
sa
```

The same command is available as `python -m pushswap.cli`.

Numbers may be given as separate arguments, inside one quoted argument
separated by spaces, or a mix of the two:

```
push-swap "5 4 3" 2 1
```

Each number is an optional `+` or `-` followed by decimal digits; a sign on
its own reads as 0. If the input is already sorted nothing is printed, and
running with no numbers prints nothing either. If a word is not of that
form, lies outside the 32-bit signed range, or repeats a value already
given, the command writes `Error` to standard error and exits with status 1.

## Library

```python
from pushswap.sort import sort_operations

ops = sort_operations([3, 2, 1])
print(ops)  # ['ra', 'sa']
```

- `pushswap.sort.sort_operations(values)` returns the list of operations.
  `pushswap.sort.Sorter` runs the same algorithm step by step; after
  `sort()` its stacks are available as `a` and `b` and the operations as
  `operations`. It raises `ValueError` if the values are not distinct.
- `pushswap.parse.parse_args(args)` turns command-line words into a list of
  integers and raises `pushswap.parse.InputError` (a `ValueError`) on bad
  input. `parse_number` and `is_digit_str` check a single word.
- `pushswap.stack.Stack` is the stack the operations act on, with `swap`,
  `rotate`, `reverse_rotate`, `push_to`, `index_of` and `is_sorted`.
  `find_pos_b` and `find_lcost_nb` are the cost queries the sorter uses.

The package also contains small general helpers used by the above:

- `pushswap.charclass`: ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`).
- `pushswap.strutil`: C-style string functions returning indices and new
  strings (`atoi`, `itoa`, `split`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`,
  `strmapi`, `striteri`).
- `pushswap.memutil`: byte-buffer functions (`memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`).
- `pushswap.fdio`: writing to text streams (`put_char`, `put_str`,
  `put_endl`, `put_nbr`), standard output by default.
- `pushswap.linkedlist`: a singly linked list, `LinkedList`, built from
  `Node` links.

## What it does not do

There is no checker: the package produces operation lists but has no
command that reads a list of operations and verifies that it sorts a given
input.

## Tests

```
pip install -e ".[test]"
pytest
```