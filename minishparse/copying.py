"""Copying text with explicit bounds on how much may be taken."""

from __future__ import annotations

from typing import Tuple


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def copy_prefix(source: str, count: int) -> str:
    """Return the first ``count`` characters of ``source``."""
    _check_count("count", count)
    return source[:count]


def bounded_copy(source: str, size: int) -> Tuple[str, int]:
    """Copy ``source`` into room for ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters, empty when
    ``size`` is 0) and the full length of ``source``, so a caller can tell
    whether the copy was truncated.
    """
    _check_count("size", size)
    copied = source[: size - 1] if size else ""
    return copied, len(source)


def bounded_concat(destination: str, source: str, size: int) -> Tuple[str, int]:
    """Append ``source`` to ``destination`` within a total room of ``size``.

    ``size`` counts the terminator, so the result never exceeds ``size - 1``
    characters. Returns the resulting text and the length the full
    concatenation would have had. When ``size`` is 0 the destination is left
    alone and the source length is returned; when ``size`` leaves no room
    past the destination, the destination is left alone and the source
    length plus ``size`` is returned.
    """
    _check_count("size", size)
    if size == 0:
        return destination, len(source)
    if size <= len(destination):
        return destination, len(source) + size
    room = size - len(destination) - 1
    return destination + source[:room], len(destination) + len(source)