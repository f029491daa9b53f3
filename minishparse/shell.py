"""The interactive front end: read lines, tokenize them and report errors."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, TextIO

from minishparse.env import parse_environment
from minishparse.lexer import Token, tokenize
from minishparse.syntax import ShellSyntaxError, check_quotes, check_tokens, format_error

PROMPT = "minishell$>"
EXIT_COMMAND = "exit"


@dataclass
class LineResult:
    """The tokens of one line, the environment it was read with, and every
    syntax problem found in it, in the order they were detected."""

    tokens: List[Token]
    environment: Mapping[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no syntax problem was found."""
        return not self.errors


def process_line(line: str, environment: Optional[Mapping[str, str]] = None) -> LineResult:
    """Tokenize ``line`` and run both syntax checks on it.

    Both checks always run, so a line can carry an operator error and a
    quoting error at once.
    """
    tokens = tokenize(line)
    result = LineResult(tokens, dict(environment or {}))
    for check in (check_tokens, check_quotes):
        try:
            check(tokens)
        except ShellSyntaxError as error:
            result.errors.append(error.message)
    return result


def run(
    lines: Iterable[str],
    environment: Optional[Mapping[str, str]] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Process ``lines`` until they run out or one of them is ``exit``.

    Syntax errors are written to ``stderr`` (standard error by default).
    Returns the exit status.
    """
    environment = dict(environment or {})
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line == EXIT_COMMAND:
            return 0
        result = process_line(line, environment)
        stream = sys.stderr if stderr is None else stderr
        for message in result.errors:
            stream.write(format_error(message))
        stream.flush()
    return 0


def _prompted_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the shell on the terminal with the process environment."""
    environment = parse_environment(f"{key}={value}" for key, value in os.environ.items())
    return run(_prompted_lines(PROMPT), environment)


if __name__ == "__main__":
    sys.exit(main())