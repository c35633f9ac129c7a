"""Text helpers: number conversion, splitting, searching and slicing.

Searches return an index into the string, or None when nothing is found,
instead of a pointer.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Tuple

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = "\t\f\n\r\v "


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed int.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Values beyond the 32-bit range wrap around.
    Text with no digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    result = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * result)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def split(text: str, separator: str) -> List[str]:
    """Split on ``separator`` and drop the empty words."""
    _single_char(separator)
    return [word for word in text.split(separator) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; ``"\\0"`` finds the end."""
    _single_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == "\0" else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; ``"\\0"`` finds the end."""
    _single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly within the first ``length`` characters.

    An empty needle is found at 0 in any non-empty haystack; nothing is
    found in an empty haystack.
    """
    if not haystack:
        return None
    if not needle:
        return 0
    index = haystack.find(needle)
    if index >= 0 and index + len(needle) <= length:
        return index
    return None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the code difference of the first differing pair, or 0.
    A shorter string compares as if padded with NUL characters.
    """
    if count <= 0:
        return 0
    pairs = zip_longest(first[:count], second[:count], fillvalue="\0")
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def strlcpy(text: str, size: int) -> Tuple[str, int]:
    """Copy into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``text``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = text[:size - 1] if size else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had; when ``size`` is not larger than ``dest`` nothing is appended and
    the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, size + len(src)
    return dest + src[:size - len(dest) - 1], len(dest) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character.

    A returned string replaces the character; None keeps it.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)