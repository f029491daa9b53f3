"""Building new strings: splitting, trimming, slicing, joining and mapping."""

from __future__ import annotations

from typing import Callable, List, Optional


def split(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"expected a single delimiter character, got {delimiter!r}")
    return [piece for piece in text.split(delimiter) if piece]


def trim(text: Optional[str], charset: str) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``text``.

    None is passed through unchanged.
    """
    if text is None:
        return None
    return text.strip(charset) if charset else text


def substring(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives the empty string; None gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if text is None:
        return None
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(first: Optional[str], second: str) -> str:
    """Concatenate two strings; a missing first string counts as empty."""
    return (first or "") + second


def map_indexed(
    text: Optional[str], func: Callable[[int, str], str]
) -> Optional[str]:
    """Build a string from ``func(index, char)`` applied to each character."""
    if text is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def iterate_indexed(
    text: Optional[str], func: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Call ``func(index, char)`` for each character of ``text``.

    A string returned by ``func`` replaces the character; None keeps it.
    The resulting text is returned; with no text or no function, ``text``
    comes back unchanged.
    """
    if text is None or func is None:
        return text
    pieces = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        pieces.append(char if replacement is None else replacement)
    return "".join(pieces)