"""Validating command-line numbers and building the initial stack."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .chars import is_digit
from .stack import Element, Stacks
from .strings import atoi, itoa, strncmp


class ArgumentError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""


def is_number(text: str) -> bool:
    """Check the shape of an integer argument.

    A lone sign, a leading ``+`` or a ``-`` not followed by a digit is
    rejected. After the first character every character must be a digit;
    the first character itself is checked only for its sign.
    """
    if not text:
        return False
    first, rest = text[0], text[1:]
    if first in "+-" and not rest:
        return False
    if first == "-" and not is_digit(rest[0]):
        return False
    if first == "+":
        return False
    return all(is_digit(char) for char in rest)


def validate_arguments(args: Sequence[str]) -> List[int]:
    """Return the integer value of every argument.

    Raises ArgumentError when an argument is not a well-formed integer,
    when its first character differs from that of the number it parses
    to, or when two arguments parse to the same value.
    """
    values = [atoi(text) for text in args]
    for text, value in zip(args, values):
        if not text or strncmp(itoa(value), text, 1) != 0:
            raise ArgumentError(f"Error: invalid number {text!r}")
        if not is_number(text):
            raise ArgumentError(f"Error: invalid number {text!r}")
    if len(set(values)) != len(values):
        raise ArgumentError("Error: duplicate numbers")
    return values


def rank_values(values: Iterable[int]) -> List[int]:
    """Return each value's position in ascending order, from 0.

    Equal values are ranked in the order they appear.
    """
    items = list(values)
    order = sorted(range(len(items)), key=lambda index: items[index])
    ranks = [0] * len(items)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks


def init_stack(args: Sequence[str], record: bool = False) -> Stacks:
    """Build stacks with the parsed arguments in ``a`` (first on top)."""
    values = [atoi(text) for text in args]
    elements = [
        Element(value, rank) for value, rank in zip(values, rank_values(values))
    ]
    return Stacks(elements, record=record)