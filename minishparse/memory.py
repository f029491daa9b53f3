"""Byte-buffer primitives: zeroing, filling, searching, comparing and copying.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``); buffers that are only read may be any bytes-like object.
Every length is checked against the buffers involved, and a request that
would run past the end of one raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: ReadableBuffer) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an integer, not {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} runs past the end of a buffer of {len(buffer)} bytes"
            )


def zero(buffer: WritableBuffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    _check_length(length, buffer)
    buffer[:length] = bytes(length)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` elements of ``size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a machine size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count >= SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes exceed the addressable size")
    return bytearray(count * size)


def find_byte(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first
    ``length`` bytes of ``data``, or None when there is none.

    Only the low eight bits of ``value`` are compared.
    """
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(first: ReadableBuffer, second: ReadableBuffer, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns 0 when they are equal, otherwise the difference between the first
    pair of bytes that differ (negative when ``first`` sorts lower).
    """
    _check_length(length, first, second)
    for left, right in zip(bytes(first[:length]), bytes(second[:length])):
        if left != right:
            return left - right
    return 0


def copy_bytes(
    destination: WritableBuffer, source: ReadableBuffer, length: int
) -> WritableBuffer:
    """Copy the first ``length`` bytes of ``source`` over the start of
    ``destination`` and return ``destination``."""
    if destination is source:
        return destination
    _check_length(length, destination, source)
    destination[:length] = bytes(source[:length])
    return destination


def move_bytes(
    buffer: WritableBuffer, destination: int, source: int, length: int
) -> WritableBuffer:
    """Copy ``length`` bytes inside ``buffer`` from offset ``source`` to offset
    ``destination``; overlapping regions are handled correctly."""
    for offset in (destination, source):
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
    _check_length(length, buffer[destination:], buffer[source:])
    buffer[destination : destination + length] = bytes(buffer[source : source + length])
    return buffer


def fill(buffer: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Set the first ``length`` bytes of ``buffer`` to the low eight bits of
    ``value`` and return ``buffer``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer