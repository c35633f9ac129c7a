# pushswap

pushswap sorts a list of distinct integers using two stacks, **a** and **b**,
and a fixed set of eleven instructions. It prints an instruction sequence that
sorts the numbers. A checker is included that applies a sequence to a list and
reports whether the list ends up sorted.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of a / b / both |
| `pa` / `pb` | move the top of b onto a / the top of a onto b |
| `ra` / `rb` / `rr` | rotate a / b / both up: the top goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate a / b / both down: the bottom goes to the top |

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, or as one argument separated by spaces.
The first number is the top of stack a:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Each instruction is printed on its own line. If the input is already sorted,
nothing is printed. Invalid input prints `Error` to standard error. Invalid
input means an argument that is not a well-formed integer, or two arguments
with the same value. With no arguments at all, the command exits with status
255. An empty single argument does nothing.

To check a sequence, give the checker the same numbers and pipe the
instructions into it:

```
push_swap 3 2 1 | checker 3 2 1
```

The checker prints `OK` if stack a ends in ascending order and `KO` otherwise.
It looks only at stack a, not at whether b is empty. If the input is already
sorted, it prints `OK` without reading any instructions. An instruction line it
cannot match prints `Error` to standard error. A line is accepted when it is a
prefix of an instruction name followed by a newline, and the first such
instruction is used, tried in the order `ra rb rr rra rrb rrr sa sb ss pa pb`.

## Library use

```python
from pushswap.args import init_stack
from pushswap.sort import sort

stacks = init_stack(["3", "2", "1"], record=True)
sort(stacks)
print(stacks.values_a())                    # [1, 2, 3]
print([str(op) for op in stacks.operations])  # ['ra', 'sa']
```

- `pushswap.stack`: `Stacks` holds both stacks and carries out an `Operation`
  (or its name) through `apply`. `Element` holds a value and its rank.
- `pushswap.args`: `validate_arguments`, `is_number`, `rank_values` and
  `init_stack`. Bad input raises `ArgumentError`, a subclass of `ValueError`.
- `pushswap.sort`: `sort`, which uses fixed patterns for up to five elements
  and cheapest insertion from b beyond that, and the steps it is built from.
- `pushswap.cli`: `collect_arguments`, `push_swap` (returns the operations),
  `parse_instruction`, `run_checker` (returns `"OK"` or `"KO"`), and the two
  command entry points `main` and `checker_main`.

The package also has some general helpers:

- `pushswap.chars`: ASCII classification and case conversion.
- `pushswap.strings`: C-style text helpers such as `atoi` (32-bit wrapping),
  `split`, `strncmp` and `strlcat`.
- `pushswap.memory`: byte-buffer helpers.
- `pushswap.output`: writing to a text stream.
- `pushswap.printf`: `sprintf` and `printf` supporting `%c %s %d %i %u %x %X %p %%`.
- `pushswap.linkedlist`: `LinkedList` and `Node`.
- `pushswap.nextline`: `LineReader`, which reads lines through a fixed-size buffer.

## Tests

```
pip install .[test]
pytest
```