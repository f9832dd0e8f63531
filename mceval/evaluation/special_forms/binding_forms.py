"""Special forms that inspect or remove variable bindings.

Each takes the variable name unevaluated:

    (defined? x)              ; bound anywhere in the chain
    (locally-defined? x)      ; bound in the innermost frame
    (make-unbound! x)         ; remove from every frame that binds it
    (locally-make-unbound! x) ; remove from the innermost frame only

All four evaluate to #t or #f.
"""

from mceval import SExpression, LispValue, EvaluatorFn
from mceval.types.errors import MalformedFormError
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol


def _target(tail: list[SExpression], form: str) -> Symbol:
    if len(tail) != 1 or not isinstance(tail[0], Symbol):
        raise MalformedFormError(f"{form} expects exactly one variable name")
    return tail[0]


def defined_form(
    tail: list[SExpression], env: Environment, forms, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    return env.is_defined(_target(tail, "defined?"))


def locally_defined_form(
    tail: list[SExpression], env: Environment, forms, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    return env.is_locally_defined(_target(tail, "locally-defined?"))


def make_unbound_form(
    tail: list[SExpression], env: Environment, forms, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    return env.unbind(_target(tail, "make-unbound!"))


def locally_make_unbound_form(
    tail: list[SExpression], env: Environment, forms, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    return env.unbind_locally(_target(tail, "locally-make-unbound!"))
