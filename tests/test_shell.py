import io

from minishparse.lexer import TokenType
from minishparse.shell import main, process_line, run
from minishparse.syntax import (
    NEWLINE_ERROR,
    PIPE_ERROR,
    UNCLOSED_DOUBLE,
    UNCLOSED_SINGLE,
    format_error,
)


def test_process_line_valid_pipeline():
    result = process_line("ls -l | wc", {"HOME": "/home"})
    assert [t.type for t in result.tokens] == [
        TokenType.STR,
        TokenType.STR,
        TokenType.PIPE,
        TokenType.STR,
        TokenType.EOF,
    ]
    assert result.errors == []
    assert result.ok
    assert result.environment == {"HOME": "/home"}


def test_process_line_leading_pipe():
    result = process_line("| ls")
    assert result.errors == [PIPE_ERROR]
    assert not result.ok


def test_process_line_trailing_redirection():
    assert process_line("cat >").errors == [NEWLINE_ERROR]


def test_process_line_unclosed_single_quote():
    assert process_line("echo 'hi").errors == [UNCLOSED_SINGLE]


def test_process_line_unclosed_double_quote():
    assert process_line('echo "hi').errors == [UNCLOSED_DOUBLE]


def test_process_line_reports_both_problems():
    assert process_line("| 'x").errors == [PIPE_ERROR, UNCLOSED_SINGLE]


def test_process_line_empty():
    result = process_line("")
    assert [t.type for t in result.tokens] == [TokenType.EOF]
    assert result.errors == []


def test_run_writes_errors():
    stream = io.StringIO()
    status = run(["ls >", "echo ok"], {}, stream)
    assert status == 0
    assert stream.getvalue() == format_error(NEWLINE_ERROR)


def test_run_stops_at_exit():
    stream = io.StringIO()
    status = run(["exit\n", "| bad"], {}, stream)
    assert status == 0
    assert stream.getvalue() == ""


def test_run_ignores_line_ending():
    stream = io.StringIO()
    run(["echo 'x\n"], {}, stream)
    assert stream.getvalue() == format_error(UNCLOSED_SINGLE)


def test_main_reads_until_end_of_input(monkeypatch, capsys):
    answers = iter(["| ls", 'echo "a'])

    def fake_input(prompt):
        assert prompt == "minishell$>"
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    err = capsys.readouterr().err
    assert err == format_error(PIPE_ERROR) + format_error(UNCLOSED_DOUBLE)


def test_main_exit_command(monkeypatch, capsys):
    answers = iter(["exit", "| never"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    assert main() == 0
    assert capsys.readouterr().err == ""