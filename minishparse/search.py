"""Searching and comparing text.

Text is treated the way a terminated character string is: asking for the
NUL character ``"\\0"`` finds the position just past the last character.
"""

from __future__ import annotations

from typing import Optional

_TERMINATOR = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an integer, not {type(limit).__name__}")
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")


def find_char(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for ``"\\0"`` in text that does not hold one returns ``len(text)``.
    """
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _TERMINATOR else None


def rfind_char(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for ``"\\0"`` returns ``len(text)``, the terminator's position.
    """
    _check_char(char)
    if char == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return where ``needle`` first occurs entirely inside the first
    ``limit`` characters of ``haystack``, or None.

    An empty needle is found at index 0 whatever the limit.
    """
    _check_limit(limit)
    if not needle:
        return 0
    index = haystack.find(needle)
    if index >= 0 and index + len(needle) <= limit:
        return index
    return None


def _difference(first: str, second: str) -> int:
    for left, right in zip(first, second):
        if left != right:
            return ord(left) - ord(right)
    if len(first) > len(second):
        return ord(first[len(second)])
    if len(second) > len(first):
        return -ord(second[len(first)])
    return 0


def compare(first: str, second: str) -> int:
    """Compare two strings character by character.

    Returns 0 when they are equal, otherwise the difference between the codes
    of the first pair that differs; the end of a string counts as code 0.
    """
    return _difference(first, second)


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Like :func:`compare`, but looks at no more than ``limit`` characters."""
    _check_limit(limit)
    return _difference(first[:limit], second[:limit])