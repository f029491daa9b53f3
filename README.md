# minishparse

The front end of a small interactive shell. It reads a command line, splits
it into tokens, checks the tokens for misplaced operators and unbalanced
quotes, and turns `KEY=value` environment entries into an ordered mapping.
It also carries a set of small text, byte, number and list helpers.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The interactive prompt

```
minishparse
```

This starts a read loop with the prompt `minishell$>`. Each line you enter
is tokenized and checked. Syntax problems are written to standard error with
a coloured `[Minishell]:` prefix:

- a line that starts with `|`, or a `|` not followed by a word:
  ``syntax error near unexpected token `|'``
- a `<`, `>`, `<<` or `>>` not followed by a word:
  ``syntax error near unexpected token `newline'``
- a single or double quote left open:
  `Unclosed single quote: '` or `Unclosed double quote: "`

Typing `exit` (or reaching end of input) leaves the loop with status 0.

## What it does not do

The shell stops after checking a line. It does not run commands, set up
pipes or redirections, read here-documents, or expand `$VARIABLES`; the
environment is read at start-up but is not used to rewrite the line. There
are no built-in commands other than `exit`, and no history of its own.

## Using it as a library

### Tokenizing

```python
from minishparse.lexer import tokenize, describe_tokens

tokens = tokenize('echo "hello world" | grep hello > out.txt')
print(describe_tokens(tokens))
```

`tokenize` returns a list of frozen `Token` objects, each with a `type`
(a `TokenType`: `PIPE`, `STR`, `IN_RD`, `OUT_RD`, `HEREDOC`, `APPEND`, `EOF`)
and a `value`. Words are separated by spaces, tabs and vertical tabs, and by
the characters `|`, `<` and `>` when they are outside quotes; quotes stay in
the word's text. `<<`, `<`, `>>`, `>` and `|` each become their own token.
The list always ends with an `EOF` token whose value is `None`. A newline met
between words ends the input, and so does a NUL character.

`TokenType.is_redirection` is true for the four redirection types.
`is_special(char)` tells whether a character is `|`, `<` or `>`.
`describe_tokens` renders one line per token: its text (or `(null)`) and its
type number.

### Checking syntax

```python
from minishparse.lexer import tokenize
from minishparse.syntax import ShellSyntaxError, check_tokens, check_quotes

tokens = tokenize("| cat")
try:
    check_tokens(tokens)
    check_quotes(tokens)
except ShellSyntaxError as error:
    print(error.message)
    print(error.formatted, end="")
```

`check_tokens` rejects a leading pipe and any pipe or redirection that is not
followed by a word. `check_quotes` rejects an unclosed single or double quote
across all tokens; a quote of one kind inside a quote of the other kind is
plain text. Both return the tokens unchanged when they pass.
`format_error(message)` produces the coloured `[Minishell]:` line that the
prompt prints.

### Environment entries

```python
import os
from minishparse.env import parse_environment, describe_environment

environment = parse_environment(f"{key}={value}" for key, value in os.environ.items())
print(describe_environment(environment))
```

Each entry is split at its first `=`. Entries without an `=` are skipped,
the original order is kept, and for a repeated key the first value wins.

### Running lines without a terminal

```python
import io
from minishparse.shell import process_line, run

result = process_line("cat <")
print(result.ok, result.errors)

errors = io.StringIO()
status = run(["ls | wc", "echo 'open", "exit"], {}, errors)
```

`process_line(line, environment)` returns a `LineResult` with the `tokens`,
a copy of the `environment`, the `errors` found (both checks always run), and
`ok`. `run(lines, environment, stderr)` processes lines until they run out or
one is `exit`, writes each error to `stderr`, and returns the exit status.

## Helper modules

- `minishparse.charclass`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `is_space`, `to_lower`, `to_upper`. Each takes a one-character
  string or an integer code; the case conversions return the same kind.
- `minishparse.numbers`: `parse_int` skips leading whitespace, takes one
  optional sign and reads digits, wrapping to a 32-bit signed result;
  `format_int` renders a 32-bit signed integer and raises `OverflowError`
  outside that range.
- `minishparse.output`: `put_char`, `put_str`, `put_line` and `put_number`
  write to a text stream, standard output by default.
- `minishparse.memory`: `zero`, `allocate_zeroed`, `find_byte`,
  `compare_bytes`, `copy_bytes`, `move_bytes` (offsets within one buffer,
  overlap-safe) and `fill`. Lengths past the end of a buffer raise
  `ValueError`.
- `minishparse.chain`: `ChainList`, a singly linked list built from an
  iterable, with `append`, `prepend`, `last`, `len()`, iteration and
  equality.
- `minishparse.search`: `find_char`, `rfind_char`, `find_within`, `compare`
  and `compare_prefix`; searching for `"\0"` finds the end of the text.
- `minishparse.textops`: `split` (drops empty pieces), `trim`, `substring`,
  `join`, `map_indexed` and `iterate_indexed`.
- `minishparse.copying`: `copy_prefix`, and `bounded_copy` and
  `bounded_concat`, which return the resulting text together with the length
  the untruncated result would have had.