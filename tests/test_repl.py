import io
from decimal import Decimal

import pytest

from swisp.__main__ import main
from swisp.errors import SwispSyntaxError
from swisp.interpreter import Interpreter
from swisp.repl import repl
from swisp.types.symbol import Symbol


def run_session(lines, interp=None):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    repl(interp or Interpreter(), "> ", stdin, stdout)
    return stdout.getvalue()


def test_interpreter_eval_reads_one_form(interp):
    assert interp.eval("(+ 1 2) (undefined)") == Decimal(3)


def test_interpreter_parse_error(interp):
    with pytest.raises(SwispSyntaxError):
        interp.eval("(+ 1 2")


def test_interpreter_uses_given_environment(env):
    interp = Interpreter(env=env)
    interp.eval("(define r 10)")
    assert env.lookup(Symbol("r")) == Decimal(10)


def test_repl_prints_results():
    out = run_session([
        "(define circle-area (lambda (r) (* pi (* r r))))",
        "(circle-area 3)",
        "(quote (a b))",
        "circle-area",
    ])
    lines = out.split("> ")
    assert lines[1] == "(lambda (r) (* pi (* r r)))\n"
    assert lines[2].startswith("28.27433388230813914")
    assert lines[3] == "((a b))\n"
    assert lines[4] == "proc\n"


def test_repl_reports_errors_and_continues():
    out = run_session(["(define x 1)", "(+ x nope)", ")", "(+ x 1)"])
    assert "swisp error: Undefined identifier: nope\n" in out
    assert "swisp error: unexpected )\n" in out
    assert out.endswith("> 2\n> \n")


def test_repl_keeps_bindings_made_before_an_error():
    out = run_session(["(set! y 4)", "y"])
    assert "swisp error: Bad syntax: set!\n" in out
    assert out.endswith("> 4\n> \n")


def test_repl_skips_blank_lines_and_stops_at_eof():
    assert run_session(["", "   ", "(+ 1 1)"]) == "> > > 2\n> \n"


def test_repl_reports_deep_non_tail_recursion():
    out = run_session([
        "(define deep (lambda (n) (if (= n 0) 0 (+ 1 (deep (- n 1))))))",
        "(deep 100000)",
        "(deep 3)",
    ])
    assert "swisp error:" in out
    assert out.endswith("> 3\n> \n")


def test_main_eval_option(capsys):
    assert main(["-e", "(+ 1 2 3)"]) == 0
    assert capsys.readouterr().out == "6\n"


def test_main_eval_error(capsys):
    assert main(["-e", "(/ 1 0)"]) == 1
    assert "swisp error:" in capsys.readouterr().err


def test_main_precision_option(capsys):
    assert main(["--precision", "4", "-e", "(/ 1 3)"]) == 0
    assert capsys.readouterr().out == "0.3333\n"


def test_main_runs_repl_with_prompt_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("SWISP_PROMPT", "swisp$ ")
    monkeypatch.setattr("sys.stdin", io.StringIO("(* 6 7)\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "swisp$ 42\nswisp$ \n"


def test_repl_reports_out_of_range_numeral_and_continues():
    out = run_session(["1e1000000", "(+ 1 1)"])
    assert "swisp error: numeral out of range: 1e1000000\n" in out
    assert out.endswith("> 2\n> \n")


def test_repl_prints_large_exponent_numeral():
    out = run_session(["1e999", "(+ 1 1)"])
    assert out == "> 1" + "0" * 999 + "\n> 2\n> \n"
