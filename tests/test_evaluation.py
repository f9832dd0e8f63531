import pytest

from mceval.evaluation.evaluator import (
    apply,
    evaluate,
    evaluate_operands,
    evaluate_sequence,
)
from mceval.types.environment import Environment
from mceval.types.errors import (
    ArityError,
    DuplicateFormError,
    UnboundVariableError,
    UnknownExpressionError,
    UnknownProcedureError,
)
from mceval.types.nil import Nil
from mceval.types.procedure import Primitive, Procedure
from mceval.types.symbol import Symbol

S = Symbol


@pytest.mark.parametrize("value", [0, 42, -7, 3.14, "hello", "", True, False])
def test_self_evaluating_literals(env, forms, value):
    assert evaluate(value, env, forms) == value
    assert evaluate(value, Environment.empty(), forms) == value


def test_quote_returns_operand_unevaluated(env, forms):
    assert evaluate([S("quote"), [S("+"), 1, 2]], env, forms) == [S("+"), 1, 2]
    assert evaluate([S("quote"), S("undefined-thing")], env, forms) == S("undefined-thing")


def test_define_returns_name_and_binds(env, forms):
    assert evaluate([S("define"), S("x"), 5], env, forms) == S("x")
    assert evaluate(S("x"), env, forms) == 5


def test_definitions_persist_across_calls(env, forms):
    evaluate([S("define"), S("a"), 1], env, forms)
    evaluate([S("define"), S("b"), [S("+"), S("a"), 1]], env, forms)
    assert evaluate(S("b"), env, forms) == 2


def test_unbound_variable(env, forms):
    with pytest.raises(UnboundVariableError):
        evaluate(S("y"), env, forms)


def test_bare_special_form_name_echoes(env, forms):
    assert evaluate(S("if"), env, forms) == S("if")
    assert evaluate(S("lambda"), env, forms) == S("lambda")


def test_unknown_expression(env, forms):
    with pytest.raises(UnknownExpressionError):
        evaluate(Nil, env, forms)
    with pytest.raises(UnknownExpressionError):
        evaluate(None, env, forms)
    with pytest.raises(UnknownExpressionError):
        evaluate({"a": 1}, env, forms)


def test_simple_application(env, forms):
    assert evaluate([S("+"), 1, 2, 3], env, forms) == 6
    assert evaluate([S("*"), [S("+"), 1, 2], [S("-"), 10, 4]], env, forms) == 18


def test_lambda_application(env, forms):
    lam = [S("lambda"), [S("a"), S("b")], [S("+"), S("a"), S("b")]]
    assert evaluate([lam, 2, 3], env, forms) == 5


def test_shadowing_leaves_global_untouched(env, forms):
    evaluate([S("define"), S("x"), 1], env, forms)
    assert evaluate([[S("lambda"), [S("x")], S("x")], 2], env, forms) == 2
    assert evaluate(S("x"), env, forms) == 1


def test_arity_error_for_user_procedures(env, forms):
    lam = [S("lambda"), [S("a"), S("b")], S("a")]
    with pytest.raises(ArityError) as info:
        evaluate([lam, 1, 2, 3], env, forms)
    assert info.value.side == "too many"
    with pytest.raises(ArityError) as info:
        evaluate([lam, 1], env, forms)
    assert info.value.side == "too few"


def test_primitive_faults_propagate(env, forms):
    with pytest.raises(ZeroDivisionError):
        evaluate([S("/"), 1, 0], env, forms)
    with pytest.raises(TypeError):
        evaluate([S("car")], env, forms)


def test_apply_unknown_procedure(env, forms):
    with pytest.raises(UnknownProcedureError):
        evaluate([1, 2, 3], env, forms)
    with pytest.raises(UnknownProcedureError):
        apply("not a procedure", [], forms)


def test_apply_directly(env, forms):
    proc = evaluate([S("lambda"), [S("n")], [S("*"), S("n"), S("n")]], env, forms)
    assert isinstance(proc, Procedure)
    assert apply(proc, [7], forms) == 49
    assert apply(Primitive("max", max), [3, 9, 4], forms) == 9


def test_operands_evaluate_left_to_right(env, forms):
    order = []

    def note(tag):
        order.append(tag)
        return tag

    env.define(S("note"), Primitive("note", note))
    values = evaluate_operands([[S("note"), 1], [S("note"), 2], [S("note"), 3]], env, forms)
    assert values == [1, 2, 3]
    assert order == [1, 2, 3]

    order.clear()
    evaluate([S("list"), [S("note"), "a"], [S("note"), "b"]], env, forms)
    assert order == ["a", "b"]


def test_evaluate_sequence_returns_last(env, forms):
    exprs = [[S("define"), S("a"), 10], [S("define"), S("b"), 20], [S("+"), S("a"), S("b")]]
    assert evaluate_sequence(exprs, env, forms) == 30


def test_closures_capture_by_reference(env, forms):
    evaluate([S("define"), S("n"), 1], env, forms)
    get_n = evaluate([S("lambda"), [], S("n")], env, forms)
    evaluate([S("set!"), S("n"), 2], env, forms)
    assert apply(get_n, [], forms) == 2


def test_define_rejects_special_form_names(env, forms):
    with pytest.raises(DuplicateFormError):
        evaluate([S("define"), S("if"), 1], env, forms)
    with pytest.raises(DuplicateFormError):
        evaluate([S("set!"), S("quote"), 1], env, forms)


def test_default_registry_is_used_when_none_given():
    env = Environment.empty()
    assert evaluate([S("quote"), S("a")], env) == S("a")
    assert evaluate([S("if"), False, 1, 2], env) == 2
