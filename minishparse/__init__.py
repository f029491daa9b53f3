"""Tokenizing, syntax and quote checking, and environment parsing for a small
interactive shell, with the text, byte and number helpers it is built on."""

__version__ = "0.1.0"

__all__ = [
    "chain",
    "charclass",
    "copying",
    "env",
    "lexer",
    "memory",
    "numbers",
    "output",
    "search",
    "shell",
    "syntax",
    "textops",
]