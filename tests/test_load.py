import pytest

from mceval.interpreter import Interpreter
from mceval.modules.source_loader import StringLoader, resolve_location
from mceval.types.errors import UnboundVariableError
from mceval.types.symbol import Symbol


def test_load_file_evaluates_each_expression(tmp_path, interp):
    src = tmp_path / "lib.scm"
    src.write_text("(define a 1)\n(define (inc x) (+ x a))\n", encoding="utf-8")
    assert interp.eval(f'(load "{src}")') == str(src)
    assert interp.eval("(inc 41)") == 42


def test_load_evaluates_in_current_environment(tmp_path, interp):
    src = tmp_path / "local.scm"
    src.write_text("(define hidden 7)", encoding="utf-8")
    interp.eval(f'(define (f) (load "{src}") (locally-defined? hidden))')
    assert interp.eval("(f)") is True
    assert interp.eval("(defined? hidden)") is False


def test_load_searches_load_path(tmp_path, monkeypatch, interp):
    (tmp_path / "found.scm").write_text("(define found 'yes)", encoding="utf-8")
    monkeypatch.setenv("MCEVAL_LOAD_PATH", str(tmp_path))
    assert resolve_location("found.scm") == tmp_path / "found.scm"
    interp.eval('(load "found.scm")')
    assert interp.eval("found") == Symbol("yes")


def test_load_missing_file(interp):
    with pytest.raises(FileNotFoundError):
        interp.eval('(load "definitely/not/here.scm")')


def test_load_with_custom_loader():
    loader = StringLoader({"prelude": "(define (square x) (* x x)) (define nine (square 3))"})
    interp = Interpreter(loader=loader)
    assert interp.eval("(load prelude)") == Symbol("prelude")
    assert interp.eval("nine") == 9
    assert interp.load("prelude") == "prelude"


def test_load_stops_at_first_error():
    loader = StringLoader({"bad": "(define ok 1) (undefined-fn) (define never 2)"})
    interp = Interpreter(loader=loader)
    with pytest.raises(UnboundVariableError):
        interp.eval('(load "bad")')
    assert interp.eval("(defined? ok)") is True
    assert interp.eval("(defined? never)") is False
