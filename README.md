# pushswap

Sort a list of integers on two stacks, **a** and **b**, using only a
fixed set of instructions. Each instruction applied is printed on its own
line, in order.

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` | swap the top two elements of stack a / b |
| `ss`        | `sa` and `sb` together |
| `pa` / `pb` | move the top of b onto a / the top of a onto b |
| `ra` / `rb` | rotate a / b up: the top element goes to the bottom |
| `rr`        | `ra` and `rb` together |
| `rra` / `rrb` | rotate a / b down: the bottom element goes to the top |
| `rrr`       | `rra` and `rrb` together (its line is printed as `rra`) |

An instruction is always printed, even when it leaves the stacks as they
were (for example `pa` with b empty).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
push-swap 2 1 3
```

The same entry point can be run as `python -m pushswap.cli 2 1 3`.

Numbers may be given as separate arguments or several to one argument,
separated by spaces (`push-swap "2 1 3"`). The first number is the top of
stack a.

- With no arguments, nothing happens and the exit status is 0.
- A word that is not an integer (an optional leading `+` or `-` followed
  only by digits), or a value that appears twice, makes the command print
  `Error` on standard output and exit with status 1. A lone sign is
  accepted and reads as 0; values wrap around as 32-bit signed integers.
- If the numbers are already in ascending order, nothing is printed.
- Otherwise, when the numbers were given in at most five arguments and
  stack a holds two to five of them, the instructions that sort them are
  printed. Then every element of stack a is printed from top to bottom,
  followed by its rank among all the numbers (0 for the smallest).

Example:

```
$ push-swap 2 1 3
sa
1     0
2     1
3     2
```

## Limits

Only two to five numbers are sorted. For more numbers, or more than five
arguments, no instructions are printed: the command prints stack a in the
order given, with each element's rank, and stops there.

## Library

The package can also be used from Python:

- `pushswap.cli` — `main(argv=None)`, the command itself; it returns the
  exit status.
- `pushswap.stacks` — `Stacks(values=(), out=None)`, holding stacks `a`
  and `b` as deques of `Node` (top first), with one method per instruction
  (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`).
  Each method applies the move and writes its name to `out`, or to standard
  output when `out` is `None`.
- `pushswap.parsing` — `is_number` and `parse_arguments`, which returns
  ranked `Node` objects and raises `ParseError` (a `ValueError` whose
  message is `Error` and whose `word` is the offending word).
- `pushswap.mini_sort` — `simple_sort(stacks)`, the instruction sequences
  for two to five numbers.
- `pushswap.utils` — `is_sorted`, `find_min`, `find_max`, `get_distance`
  and `index_init`.
- `pushswap.linked` — `Node` (value, rank and link) and `LinkedList`, a
  singly linked list of nodes with `push_front`, `push_back`, `last`,
  `clear`, `iterate` and `map`, plus `delete_one`.
- `pushswap.printf` — `cformat` and `printf`, a small formatter supporting
  `%c %s %d %i %u %p %x %X %%`, with `to_hex`, `pointer_repr` and
  `format_spec`.
- `pushswap.chars`, `pushswap.strings`, `pushswap.memory`,
  `pushswap.convert`, `pushswap.output` — character, string, byte-buffer,
  conversion (`atoi`, `itoa`, `split`) and output helpers.