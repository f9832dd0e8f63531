from mceval import EvaluatorFn
from mceval import SExpression, LispValue
from mceval.types.errors import DuplicateFormError, MalformedFormError
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol
from mceval.evaluation.registry import SpecialFormRegistry
from mceval.evaluation.syntax import make_lambda


def check_variable_name(name: SExpression, forms: SpecialFormRegistry, form: str) -> Symbol:
    """Reject non-symbols and names that belong to a special form."""
    if not isinstance(name, Symbol):
        raise MalformedFormError(f"{form} target must be a symbol, got {name!r}")
    if name in forms:
        raise DuplicateFormError(f"{name} names a special form and cannot be used as a variable")
    return name


def define_form(
    tail: list[SExpression],
    env: Environment,
    forms: SpecialFormRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (define name value)
    (define (name param ...) body ...)  => (define name (lambda (param ...) body ...))
    Evaluates to the defined name.
    """
    if not tail:
        raise MalformedFormError("define requires a target")

    target = tail[0]
    if isinstance(target, list):
        if not target:
            raise MalformedFormError("define requires a procedure name")
        name, *params = target
        value_expr = make_lambda(params, tail[1:])
    else:
        if len(tail) != 2:
            raise MalformedFormError("define requires exactly 2 arguments")
        name, value_expr = target, tail[1]

    name = check_variable_name(name, forms, "define")
    value = evaluate_fn(value_expr, env, forms)
    env.define(name, value)
    return name
