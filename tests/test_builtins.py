import pytest

from mceval.builtin.env_builtin import install_primitive
from mceval.types.errors import DuplicateFormError
from mceval.types.nil import Nil
from mceval.types.procedure import Primitive
from mceval.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+)", 0),
        ("(- 10 3 2)", 5),
        ("(- 4)", -4),
        ("(* 2 3 4)", 24),
        ("(*)", 1),
        ("(/ 12 3)", 4),
        ("(/ 1 2)", 0.5),
        ("(+ 1 2.5)", 3.5),
        ("(= 2 2)", True),
        ("(= 2 3)", False),
        ("(= 1 1 1)", True),
        ("(< 1 2 3)", True),
        ("(> 1 2)", False),
        ("(car '(1 2 3))", 1),
        ("(cdr '(1 2 3))", [2, 3]),
        ("(cdr '(1))", Nil),
        ("(cons 1 '(2 3))", [1, 2, 3]),
        ("(cons 1 '())", [1]),
        ("(cons 1 2)", (1, 2)),
        ("(car (cons 1 2))", 1),
        ("(cdr (cons 1 2))", 2),
        ("(null? '())", True),
        ("(null? '(1))", False),
        ("(null? (cdr '(1)))", True),
        ("(list 1 2 3)", [1, 2, 3]),
        ("(list)", Nil),
        ("(eq? 'a 'a)", True),
        ("(eq? 'a 'b)", False),
        ("(eq? '() '())", True),
        ("(not #f)", True),
        ("(not 0)", False),
    ],
)
def test_primitives(interp, source, expected):
    assert interp.eval(source) == expected


def test_display_and_newline(interp, capsys):
    interp.eval('(display "hi")')
    interp.eval("(newline)")
    interp.eval("(display '(1 \"two\" #t))")
    assert capsys.readouterr().out == 'hi\n(1 two #t)'


def test_primitive_faults_are_not_wrapped(interp):
    with pytest.raises(ZeroDivisionError):
        interp.eval("(/ 1 0)")
    with pytest.raises(TypeError):
        interp.eval("(car '())")
    with pytest.raises(TypeError):
        interp.eval("(cons 1)")


def test_install_primitive_binds_in_global_frame(env, forms):
    inner = env.extend([Symbol("a")], [1])
    assert install_primitive(inner, "twice", lambda x: 2 * x, forms) == Symbol("twice")
    assert not inner.is_locally_defined(Symbol("twice"))
    prim = env.lookup(Symbol("twice"))
    assert isinstance(prim, Primitive)
    assert prim.fn(4) == 8


def test_install_primitive_rejects_special_form_names(env, forms):
    with pytest.raises(DuplicateFormError):
        install_primitive(env, "begin", lambda: None, forms)


def test_interpreter_install_primitive(interp):
    interp.install_primitive("square", lambda x: x * x)
    assert interp.eval("(square 9)") == 81
