"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LLONG_MAX = 2**63 - 1
_ULONG_MASK = 2**64 - 1
_LEADING_SPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def parse_int(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is honoured and digits
    are read until the first non-digit. Text without digits yields 0. A
    magnitude beyond the signed 64-bit range yields -1 for a positive number
    and 0 for a negative one; other results wrap to a 32-bit signed integer.
    """
    position = 0
    while position < len(text) and text[position] in _LEADING_SPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    magnitude = 0
    for char in text[position:]:
        if not "0" <= char <= "9":
            break
        magnitude = (magnitude * 10 + ord(char) - ord("0")) & _ULONG_MASK
    if magnitude > _LLONG_MAX:
        return -1 if sign == 1 else 0
    return _wrap_int32(sign * magnitude)


def format_int(number: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, not {type(number).__name__}")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)