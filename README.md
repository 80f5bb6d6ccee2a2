# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of moves. It prints the sequence of moves that leaves every number in
ascending order on stack `a`, smallest on top, with `b` empty.

## Moves

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Command line

Install the package, then pass the numbers as separate arguments, as one
quoted space-separated argument, or a mix of both. The first number given
is the top of stack `a`.

```
pip install .
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Each move is printed on its own line on standard output; nothing is printed
for input that is already sorted.

- With no arguments nothing is printed and the exit status is 1.
- If a word is not an optionally signed run of decimal digits, or lies
  outside the signed 32-bit range, `Error` is written to standard error and
  the exit status is 0.
- If a number appears twice, `Error` is written to standard error and the
  exit status is 1.

The command is also reachable as `python -m pushswap.cli`.

## How it sorts

Values are first replaced by their rank (0 for the smallest). Stacks of two
or three are handled by fixed move patterns. Below 50 elements, each smallest
remaining rank is rotated to the top by the shorter direction and pushed to
`b`, then everything is pushed back. Finally a radix pass over the binary
digits of the ranks sorts whatever is left.

## Library use

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks

ops = solve([3, 2, 1])           # list of Operation members
stacks = Stacks.from_values([3, 2, 1])
for op in ops:
    stacks.apply(op)
assert list(stacks.a) == [1, 2, 3]
```

- `pushswap.stacks`: the `Operation` enum (its values are the move names)
  and `Stacks`, which holds `a` and `b` as deques, records every move in
  `ops` and, given a `stream`, writes each move name to it. Each move is
  also a method (`sa()`, `pb()`, `rra()` and so on). `pa`/`pb` on an empty
  source stack raise `IndexError`.
- `pushswap.parsing`: `parse_int`, `load_numbers` and `ensure_unique`,
  which raise `InputError` (a `ValueError`) on bad input.
- `pushswap.indexing`: `rank`, `get_bit`, `all_bit_set`, `has_ended`,
  `in_order` and `in_reverse_order`.
- `pushswap.solver`: `solve`, plus the steps it is built from:
  `solve_small`, `solve_insert`, `radix_resolve` and `find_pos`.

The `pushswap.libft` sub-package holds small helpers:

- `charclass`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`).
- `memory`: `bytearray` helpers (`memset`, `bzero`, `calloc`, `memcpy`,
  `memmove`, `memchr`, `memcmp`).
- `strings`: C-style string queries that treat a NUL as the end
  (`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `strdup`, `atoi`, `itoa`).
- `strtools`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`.
- `output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` writing to
  a text stream.
- `linked`: a singly linked `Node` with `lst_new`, `lst_add_front`,
  `lst_size`, `lst_last`, `lst_add_back`, `lst_delone`, `lst_clear`,
  `lst_iter` and `lst_map`.

## What it does not do

There is no checker command: the package does not read a list of moves from
input to verify them against a stack. `Stacks.apply` can be used for that
from Python.

## Tests

```
pip install .[test]
pytest
```