# pushswap

Sort a list of distinct integers using two stacks, **a** and **b**, and a
fixed set of operations. The `push_swap` command prints the operations that
turn stack **a** into ascending order, one per line.

## Operations

| Name  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of a              |
| `sb`  | swap the top two elements of b              |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of b onto a                    |
| `pb`  | move the top of a onto b                    |
| `ra`  | rotate a up (top goes to the bottom)        |
| `rb`  | rotate b up                                 |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate a down (bottom goes to the top)      |
| `rrb` | rotate b down                               |
| `rrr` | `rra` and `rrb` together                    |

An operation with nothing to act on leaves the stacks unchanged.

## Command line

```console
$ push_swap 2 1 3 6 5 8
```

The numbers may also be given as a single argument, split on spaces:

```console
$ push_swap "3 2 1"
```

- Nothing is printed when the input is already sorted; the exit status is 0.
- With no arguments, or a single empty argument, the command prints nothing
  and exits with status 1.
- An argument that is not an optional sign followed by digits, a value
  outside the 32-bit signed range, or a repeated value makes the command
  print `Error` on standard output and exit with status 1. A lone sign
  (`+` or `-`) is read as 0.

Two numbers are sorted with `sa`, three with at most two moves, and larger
inputs with a cost-based strategy: numbers are pushed to **b** choosing each
time the one that needs the fewest rotations, the last three in **a** are
sorted directly, everything is brought back to **a**, and **a** is rotated
until its smallest number is on top.

## Library use

```python
from pushswap.sorter import solve

moves = solve([2, 1, 3, 6, 5, 8])
```

`solve` returns the list of operation names. For finer control:

- `pushswap.stacks.Stacks(values, output=None)` holds the two stacks as
  `a` and `b` (top at index 0), has one method per operation (`sa()`,
  `pb()`, `rra()`, …), records every move in `moves`, and writes each move
  on its own line to `output` when a stream is given.
- `pushswap.sorter.sort(stacks)` sorts `stacks.a`; `sort_three` and
  `sort_stacks` are the two strategies it chooses between.
- `pushswap.stacks.is_sorted(values)` tells whether values never decrease.
- `pushswap.parsing.parse_arguments(args)` turns strings into distinct
  32-bit integers and raises `pushswap.parsing.InputError` (a `ValueError`)
  for bad input; `is_valid_number(text)` checks a single string.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit status.

## Helper sub-package

`pushswap.libft` holds small helpers the program is built on:

- `chars` – ASCII classification and case conversion (`is_digit`, `to_upper`, …).
- `convert` – `atoi`, `atol` and `itoa`.
- `memory` – `bytearray` helpers (`memset`, `memcpy`, `memmove`, `memcmp`, …).
- `strings` – NUL-terminated string helpers returning indexes
  (`strlen`, `strchr`, `strlcpy`, `strnstr`, …).
- `transform` – `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`, `split`.
- `reader` – `LineReader`, which reads a text or binary stream line by line,
  and `get_next_line(fd)` for file descriptors.
- `lists` – `LinkedList` and its `Node`.
- `output` – `format_printf`/`printf` with `%c %s %d %i %x %X %u %p %%`, and
  `put_char`, `put_str`, `put_endl`, `put_nbr`.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input; the package only produces the operations.

## Tests

```console
$ pip install -e ".[test]"
$ pytest
```