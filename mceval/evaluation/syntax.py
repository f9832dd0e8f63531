"""Expression predicates and constructors shared by the kernel and derived forms."""

from __future__ import annotations

from mceval import SExpression, LispValue
from mceval.types.nil import Nil
from mceval.types.symbol import Symbol

QUOTE = Symbol("quote")
IF = Symbol("if")
BEGIN = Symbol("begin")
LAMBDA = Symbol("lambda")
ELSE = Symbol("else")


def make_no_value() -> list:
    """A fresh expression whose value is the "no value" marker."""
    return [QUOTE, Nil]


def is_self_evaluating(expr: SExpression) -> bool:
    return isinstance(expr, (bool, int, float, str))


def is_variable(expr: SExpression) -> bool:
    return isinstance(expr, Symbol)


def is_application(expr: SExpression) -> bool:
    return isinstance(expr, list) and len(expr) > 0


def type_tag(expr: SExpression) -> Symbol | None:
    """The operator symbol of a compound form, else None."""
    if isinstance(expr, list) and expr and isinstance(expr[0], Symbol):
        return expr[0]
    return None


def is_true(value: LispValue) -> bool:
    # Only #f is false
    return value is not False


def make_if(predicate: SExpression, consequent: SExpression, alternative: SExpression) -> list:
    return [IF, predicate, consequent, alternative]


def make_lambda(parameters: list[Symbol], body: list[SExpression]) -> list:
    return [LAMBDA, list(parameters), *body]


def sequence_to_exp(exprs: list[SExpression]) -> SExpression:
    """Collapse a sequence into one expression, wrapping in begin when needed."""
    if not exprs:
        return make_no_value()
    if len(exprs) == 1:
        return exprs[0]
    return [BEGIN, *exprs]
