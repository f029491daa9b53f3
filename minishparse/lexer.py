"""Splitting a command line into words, redirections and pipes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

_BLANKS = " \t\v"
_QUOTES = "'\""
_SPECIALS = "|<>"
_LINE_END = "\n"
_TERMINATOR = "\0"


class TokenType(IntEnum):
    """Kinds of token produced by :func:`tokenize`."""

    PIPE = 0
    STR = 1
    IN_RD = 2
    OUT_RD = 3
    HEREDOC = 4
    APPEND = 5
    EOF = 6

    @property
    def is_redirection(self) -> bool:
        """True for the four redirection operators."""
        return self in (
            TokenType.IN_RD,
            TokenType.OUT_RD,
            TokenType.HEREDOC,
            TokenType.APPEND,
        )


@dataclass(frozen=True)
class Token:
    """One lexical unit; the end-of-input token carries no value."""

    type: TokenType
    value: Optional[str] = None


_OPERATORS: Tuple[Tuple[str, TokenType], ...] = (
    ("<<", TokenType.HEREDOC),
    ("<", TokenType.IN_RD),
    (">>", TokenType.APPEND),
    (">", TokenType.OUT_RD),
    ("|", TokenType.PIPE),
)


def is_special(char: str) -> bool:
    """True for the operator characters ``|``, ``<`` and ``>``."""
    return len(char) == 1 and char in _SPECIALS


def _read_word(line: str, position: int) -> Tuple[str, int]:
    """Read a word starting at ``position``; quoted text keeps its quotes."""
    start = position
    quote: Optional[str] = None
    while position < len(line):
        char = line[position]
        if quote is None and char in _QUOTES:
            quote = char
        elif char == quote:
            quote = None
        if quote is None and (char in _SPECIALS or char in _BLANKS):
            break
        position += 1
    return line[start:position], position


def _read_operator(line: str, position: int, tokens: List[Token]) -> int:
    for text, kind in _OPERATORS:
        if line.startswith(text, position):
            tokens.append(Token(kind, text))
            return position + len(text)
    return position


def tokenize(line: str) -> List[Token]:
    """Split ``line`` into tokens, ending with an end-of-input token.

    Words are separated by spaces, tabs and vertical tabs, and by the
    operators ``<``, ``<<``, ``>``, ``>>`` and ``|`` outside quotes. Quotes
    are kept in the word's text. A newline met between words ends the input.
    """
    line = line.split(_TERMINATOR, 1)[0]
    tokens: List[Token] = []
    position = 0
    while position < len(line) and line[position] != _LINE_END:
        while position < len(line) and line[position] in _BLANKS:
            position += 1
        word, position = _read_word(line, position)
        if word:
            tokens.append(Token(TokenType.STR, word))
        else:
            position = _read_operator(line, position, tokens)
    tokens.append(Token(TokenType.EOF))
    return tokens


def describe_tokens(tokens: Iterable[Token]) -> str:
    """Render one line per token: its text (or ``(null)``) and its type number."""
    return "".join(
        f"{'(null)' if token.value is None else token.value} {int(token.type)}\n"
        for token in tokens
    )