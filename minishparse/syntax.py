"""Checks on token sequences: operator placement and balanced quotes."""

from __future__ import annotations

from typing import List, Optional, Sequence

from minishparse.lexer import Token, TokenType

_ERROR_PREFIX = "\033[1;31m[Minishell]\033[0m:"
PIPE_ERROR = "syntax error near unexpected token `|'"
NEWLINE_ERROR = "syntax error near unexpected token `newline'"
UNCLOSED_SINGLE = "Unclosed single quote: '"
UNCLOSED_DOUBLE = 'Unclosed double quote: "'


class ShellSyntaxError(Exception):
    """A command line that cannot be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def formatted(self) -> str:
        """The message as it is reported on the error stream."""
        return format_error(self.message)


def format_error(message: str) -> str:
    """Decorate ``message`` with the shell's coloured prefix and a newline."""
    return f"{_ERROR_PREFIX}{message}\n"


def _operator_error(token: Token, following: Optional[Token]) -> Optional[str]:
    if following is None or following.type == TokenType.STR:
        return None
    if token.type == TokenType.PIPE:
        return PIPE_ERROR
    if token.type.is_redirection:
        return NEWLINE_ERROR
    return None


def check_tokens(tokens: Sequence[Token]) -> Sequence[Token]:
    """Check that operators are placed where they may be.

    A line may not start with a pipe; every pipe and redirection must be
    followed by a word. Raises :class:`ShellSyntaxError` on the first problem
    and returns ``tokens`` unchanged otherwise.
    """
    if tokens and tokens[0].type == TokenType.PIPE:
        raise ShellSyntaxError(PIPE_ERROR)
    followers: List[Optional[Token]] = list(tokens[1:]) + [None]
    for token, following in zip(tokens, followers):
        message = _operator_error(token, following)
        if message is not None:
            raise ShellSyntaxError(message)
    return tokens


def check_quotes(tokens: Sequence[Token]) -> Sequence[Token]:
    """Check that single and double quotes are closed across all tokens.

    A quote of one kind inside a quote of the other kind is ordinary text.
    Raises :class:`ShellSyntaxError` when a quote is left open and returns
    ``tokens`` unchanged otherwise.
    """
    open_quote: Optional[str] = None
    for token in tokens:
        if token.value is None:
            continue
        for char in token.value:
            if char not in "'\"":
                continue
            if open_quote is None:
                open_quote = char
            elif open_quote == char:
                open_quote = None
    if open_quote == "'":
        raise ShellSyntaxError(UNCLOSED_SINGLE)
    if open_quote == '"':
        raise ShellSyntaxError(UNCLOSED_DOUBLE)
    return tokens