# pushswap

A solver for the push_swap puzzle. Given a list of distinct integers, it
sorts them using two stacks, `a` and `b`, and a small set of operations,
and prints each operation it used on its own line.

## The operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of stack a or b |
| `ss` | `sa` and `sb` together |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb` | rotate a or b upwards: the top element goes to the bottom |
| `rr` | `ra` and `rb` together |
| `rra`, `rrb` | rotate a or b downwards: the bottom element goes to the top |
| `rrr` | `rra` and `rrb` together |

When a sort finishes, stack a holds every number in ascending order with
the smallest on top, and stack b is empty.

## Installation

```
pip install .
```

## Command line

Give the numbers either as separate arguments or as one argument with the
numbers separated by spaces:

```
push-swap 3 2 1
push-swap "5 -2 17 0 8"
```

The operations go to standard output, one per line.

- No arguments, an empty argument, or an argument made only of spaces:
  nothing is printed.
- Input that is already in ascending order: nothing is printed.
- A token that is not an optionally signed run of digits, a number outside
  the 32-bit signed range, a token longer than 12 characters, or two tokens
  with the same value: `Error` is written to standard error, no operations
  are printed, and the exit status is 0. Only spaces separate numbers inside
  a single argument; a tab, for instance, makes the token invalid.
- For more than ten numbers the input is first split into bands around the
  median. If that leaves stack a with fewer than three elements (which can
  happen when the median is negative), `Error` is written to standard error
  and the exit status is 1.

## Library use

```python
from pushswap.parse import InputError, parse_arguments
from pushswap.sort import solve
from pushswap.stacks import PushSwap

numbers = parse_arguments(["4", "1", "3", "2"])
moves = solve(numbers)          # a list of operation names, e.g. "pb", "ra"
```

- `pushswap.parse` — `parse_arguments(args)` turns command-line arguments
  into a list of integers and raises `InputError` (a `ValueError`) for
  invalid input. `atoi`, `is_blank`, `has_duplicates` and `is_valid` are
  the checks it is built from.
- `pushswap.stacks` — `PushSwap(numbers)` holds stacks `a` and `b` (lists
  of `Node`, index 0 on top) and the list `moves` of operations applied so
  far. `swap`, `rotate`, `reverse_rotate` and `push` take the name of a
  stack (`"a"` or `"b"`; `push("a")` moves the top of b onto a); they do
  nothing and record nothing when there is nothing to move. `ss`, `rr` and
  `rrr` act on both stacks and are always recorded. `describe(name)`
  returns a text dump of one stack's nodes for debugging.
- `pushswap.median` — ranking the numbers (`assign_targets`, which returns
  the median) and moving them from a to b (`push_small`,
  `push_around_median`).
- `pushswap.cost` — where each element of b should land in a and how many
  rotations that takes (`assign_goals`, `move_cost`, `assign_costs`), and
  rotating a chosen value to the top (`put_top_a`, `put_top_b`).
- `pushswap.sort` — `solve(numbers)` runs the whole sort and returns the
  operations; `sort_three`, `cheapest`, `insertion_step`, `finish` and
  `is_in_order` are its steps.
- `pushswap.cli` — `main(argv=None)` is the `push-swap` command.

## What it does not do

There is no checker: the package produces operation lists but offers no
command that reads a list of operations and verifies that it sorts a given
input.

## Tests

```
pip install .[test]
pytest
```