"""
Interactive loop tests.
"""

import io
import sys

import pytest

from main import main, read_line, run_repl
from utils import format_result


class InterruptingStream:
    def readline(self):
        raise KeyboardInterrupt


class UndecodableLineStream:
    """Raises UnicodeDecodeError for the first line, then serves the rest."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.failed = False

    def readline(self):
        if not self.failed:
            self.failed = True
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return self.lines.pop(0) if self.lines else ""


def test_repl_session():
    stdin = io.StringIO("(1+2)*3\n\nfoo\n2^3^2\n")
    stdout = io.StringIO()

    assert run_repl(stdin, stdout) == 0
    assert stdout.getvalue() == (
        ">> 9\n"
        ">> "
        ">> Invalid characters were detected in the expression.\n"
        ">> 512\n"
        ">> "
    )


def test_repl_continues_after_errors():
    stdin = io.StringIO("(1+2\n1 3\n+\n1 % 2\n1+1")
    stdout = io.StringIO()

    assert run_repl(stdin, stdout) == 0
    lines = stdout.getvalue().split("\n")
    assert lines == [
        ">> Mismatched parentheses were detected!",
        ">> Too many inputs for a given operation were supplied, e.g. 1 3 + 4",
        ">> Not enough inputs for the given expression, e.g. 1 - 2 +",
        ">> An unknown operator was supplied.",
        ">> 2",
        ">> ",
    ]


def test_repl_exits_on_empty_input():
    stdout = io.StringIO()
    assert run_repl(io.StringIO(""), stdout) == 0
    assert stdout.getvalue() == ">> "


def test_repl_exits_on_keyboard_interrupt():
    stdout = io.StringIO()
    assert run_repl(InterruptingStream(), stdout) == 0
    assert stdout.getvalue() == ">> \n"


def test_read_line_strips_line_endings():
    stream = io.StringIO("1+1\r\n2\n")
    assert read_line(stream) == "1+1"
    assert read_line(stream) == "2"
    assert read_line(stream) is None


@pytest.mark.parametrize("value, expected", [
    (512.0, "512"),
    (9.0, "9"),
    (1 / 3, "0.333333"),
    (2.5, "2.5"),
    (-0.5, "-0.5"),
    (1e20, "1e+20"),
    (1234567.0, "1.23457e+06"),
    (float("inf"), "inf"),
    (float("-inf"), "-inf"),
    (float("nan"), "nan"),
])
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("10/2-3\n"))
    assert main() == 0
    assert capsys.readouterr().out == ">> 2\n>> "


def test_repl_survives_replaced_bytes():
    stdin = io.TextIOWrapper(io.BytesIO(b"1+1\n\xff\xfe\n2+2\n"), encoding="utf-8", errors="replace")
    stdout = io.StringIO()

    assert run_repl(stdin, stdout) == 0
    assert stdout.getvalue() == (
        ">> 2\n"
        ">> An unknown operator was supplied.\n"
        ">> 4\n"
        ">> "
    )


def test_repl_survives_decode_error():
    stdout = io.StringIO()

    assert run_repl(UndecodableLineStream(["2+2\n"]), stdout) == 0
    assert stdout.getvalue() == (
        ">> Invalid characters were detected in the expression.\n"
        ">> 4\n"
        ">> "
    )
