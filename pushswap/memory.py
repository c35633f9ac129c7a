"""Byte-buffer helpers: search, compare, copy, fill and allocate."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_CALLOC_LIMIT = 2147483424


def _check_count(count: int, *buffers: BytesLike) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buf in buffers:
        if count > len(buf):
            raise IndexError("count exceeds buffer length")


def memchr(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first
    ``count`` bytes, or None if there is none."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, count: int) -> int:
    """Compare the first ``count`` bytes; return the difference of the first
    pair that differs, or 0 when they are all equal."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: BytesLike, count: int) -> bytearray:
    """Copy ``count`` bytes of ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    if dest is not src:
        dest[:count] = bytes(src[:count])
    return dest


def memmove(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from ``src_offset`` to
    ``dest_offset``; the two regions may overlap."""
    if count < 0 or dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest_offset, src_offset) + count > len(buffer):
        raise IndexError("region exceeds buffer length")
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (as a byte)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer``."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the request exceeds the allocation limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > _CALLOC_LIMIT // size:
        raise OverflowError("allocation too large")
    return bytearray(count * size)