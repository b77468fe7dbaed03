import io
import logging

import pytest

from lispy import config
from lispy.interpreter import Interpreter
from lispy.repl import main, repl


def feed(*lines):
    """Build an input function that replays `lines`, then signals EOF."""
    pending = list(lines)

    def input_fn(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return input_fn


def run_session(*lines):
    output = io.StringIO()
    repl(Interpreter(), input_fn=feed(*lines), output=output)
    return output.getvalue()


def test_prints_results():
    assert run_session("(+ 1 2)", "(quote (a b))") == "3\n(a b)\n\n"


def test_define_prints_nothing():
    assert run_session("(define x 3)", "x") == "3\n\n"


def test_errors_are_reported_and_loop_continues():
    out = run_session("(car 1)", "undefined-thing", "(+ 1", "(* 2 3)")
    lines = out.splitlines()
    assert lines[0].startswith("error: ")
    assert lines[1] == "error: Undefined variable: undefined-thing"
    assert lines[2] == "error: unexpected end of input"
    assert lines[3] == "6"


def test_exit_command_stops_loop():
    assert run_session("(exit)", "(+ 1 2)") == ""


def test_blank_lines_are_skipped():
    assert run_session("", "   ", "1") == "1\n\n"


def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / "prog.lisp"
    program.write_text("(define sq (lambda (x) (* x x)))\n(sq 9)\n")
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == "81\n"


def test_main_reports_file_errors(tmp_path, capsys):
    program = tmp_path / "bad.lisp"
    program.write_text("(oops)")
    assert main([str(program)]) == 1
    assert capsys.readouterr().out.startswith("error: ")


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setenv("LISPY_PROMPT", "> ")
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        if len(prompts) > 1:
            raise EOFError
        return "(- 10 4)"

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert capsys.readouterr().out == "6\n\n"
    assert prompts == ["> ", "> "]


# -------------------------------
# Configuration
# -------------------------------
def test_config_defaults(monkeypatch):
    for var in ("LISPY_PROMPT", "LISPY_LOG_LEVEL", "LISPY_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == config.DEFAULT_PROMPT
    assert config.get_log_level() == logging.WARNING
    assert config.get_recursion_limit() is None


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", "5000")
    assert config.get_log_level() == logging.DEBUG
    assert config.get_recursion_limit() == 5000


def test_config_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LISPY_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING


def test_config_bad_recursion_limit(monkeypatch):
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError, match="LISPY_RECURSION_LIMIT"):
        config.get_recursion_limit()


@pytest.mark.parametrize("limit", ["0", "-5", "lots"])
def test_main_rejects_bad_recursion_limit(monkeypatch, capsys, limit):
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", limit)
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "invalid LISPY_RECURSION_LIMIT" in capsys.readouterr().err
