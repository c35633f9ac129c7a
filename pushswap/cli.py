"""Command-line entry points: the sorter and the instruction checker."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .args import ArgumentError, init_stack, validate_arguments
from .nextline import LineReader
from .sort import sort
from .stack import Operation
from .strings import split

NO_ARGUMENTS_STATUS = 255

# Instructions in the order a line is matched against them.
_INSTRUCTION_ORDER = (
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
    Operation.SA,
    Operation.SB,
    Operation.SS,
    Operation.PA,
    Operation.PB,
)


def collect_arguments(argv: Sequence[str]) -> List[str]:
    """Return the numbers to work on from the command-line arguments.

    A single argument is split on spaces; several arguments are taken as
    they are. An empty result means there is nothing to do.
    """
    if len(argv) == 1:
        return split(argv[0], " ")
    return list(argv)


def push_swap(args: Sequence[str]) -> List[Operation]:
    """Return the instructions that sort ``args``.

    An already sorted input gives no instructions. Raises ArgumentError
    for invalid or duplicate numbers.
    """
    validate_arguments(args)
    stacks = init_stack(args, record=True)
    if stacks.is_sorted():
        return []
    sort(stacks)
    return list(stacks.operations)


def parse_instruction(line: str) -> Operation:
    """Return the instruction a line read from input names.

    A line matches the first instruction whose text, newline included,
    begins with it. Raises ValueError when none does.
    """
    for operation in _INSTRUCTION_ORDER:
        if (operation.value + "\n").startswith(line):
            return operation
    raise ValueError(f"unknown instruction {line!r}")


def run_checker(args: Sequence[str], lines: Iterable[str]) -> str:
    """Apply the instructions in ``lines`` to ``args`` and judge the result.

    Returns ``"OK"`` when stack ``a`` ends up sorted and ``"KO"`` otherwise.
    An input that is already sorted is judged without reading any line.
    Raises ArgumentError for bad numbers and ValueError for a bad line.
    """
    validate_arguments(args)
    stacks = init_stack(args)
    if stacks.is_sorted():
        return "OK"
    for line in lines:
        stacks.apply(parse_instruction(line))
    return "OK" if stacks.is_sorted() else "KO"


def _report_error() -> int:
    sys.stderr.write("Error\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the instructions that sort the numbers given as arguments."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        return NO_ARGUMENTS_STATUS
    args = collect_arguments(argv)
    if not args:
        return 0
    try:
        operations = push_swap(args)
    except ArgumentError:
        return _report_error()
    for operation in operations:
        print(operation)
    return 0


def checker_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        return NO_ARGUMENTS_STATUS
    args = collect_arguments(argv)
    if not args:
        return 0
    try:
        verdict = run_checker(args, LineReader(sys.stdin))
    except ValueError:
        return _report_error()
    print(verdict)
    return 0