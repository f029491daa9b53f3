"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from minishparse.numbers import format_int


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; nothing is written when it is None."""
    if text:
        _target(stream).write(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes just the newline."""
    _target(stream).write((text or "") + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(format_int(number))