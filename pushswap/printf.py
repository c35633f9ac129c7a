"""A small printf: %c %s %d %i %u %x %X %p and %%.

Integers are treated as 32-bit C ints and pointers as 64-bit addresses.
A conversion character that is not recognised produces no output and
consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONSUMING = frozenset("csdiuxXp")


def format_signed(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit signed int."""
    wrapped = (number + 2**31) % 2**32 - 2**31
    return str(wrapped)


def format_unsigned(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit unsigned int."""
    return str(number & _UINT_MASK)


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal text of ``number`` taken as a 32-bit unsigned int."""
    text = format(number & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_pointer(address: int) -> str:
    """``0x``-prefixed lowercase hex address, or ``(nil)`` for zero."""
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONSUMING:
        return ""
    try:
        value = next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return format_signed(value)
    if spec == "u":
        return format_unsigned(value)
    if spec == "p":
        return format_pointer(value)
    return format_hex(value, upper=spec == "X")


def sprintf(template: Optional[str], *args: Any) -> str:
    """Return ``template`` with its conversions replaced by ``args``.

    A None template gives an empty string; a lone ``%`` at the very end
    is dropped.
    """
    if template is None:
        return ""
    arguments = iter(args)
    chars = iter(template)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(template: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)