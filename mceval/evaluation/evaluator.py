"""Core evaluator for mceval.

`evaluate` classifies an expression and either dispatches to a registered
special-form handler, answers it directly (atoms, variables), or evaluates an
application and hands it to the application engine. Procedure bodies in tail
position come back as TailCall records which `evaluate` steps in a loop, so
tail-recursive programs do not grow the Python stack.
"""

from __future__ import annotations

import logging

from mceval import SExpression, LispValue
from mceval.types.environment import Environment
from mceval.types.errors import UnknownExpressionError
from mceval.types.symbol import Symbol
from mceval.evaluation.apply import apply_procedure, trampoline
from mceval.evaluation.registry import SpecialFormRegistry
from mceval.evaluation.sequence import eval_sequence, eval_operands
from mceval.evaluation.special_forms import SPECIAL_FORMS
from mceval.evaluation.syntax import (
    is_application,
    is_self_evaluating,
    is_variable,
    type_tag,
)

logger = logging.getLogger(__name__)


def evaluate(
    expr: SExpression, env: Environment, forms: SpecialFormRegistry | None = None
) -> LispValue:
    """Evaluate `expr` in `env` to a value."""
    if forms is None:
        forms = SPECIAL_FORMS
    return trampoline(evaluate0(expr, env, forms, True), forms, evaluate0)


def evaluate0(
    expr: SExpression,
    env: Environment,
    forms: SpecialFormRegistry | None = None,
    is_tail_call: bool = False,
) -> LispValue:
    """Single evaluation step.

    With `is_tail_call` set the result may be a TailCall; otherwise it is
    always a value.
    """
    if forms is None:
        forms = SPECIAL_FORMS

    handler = forms.lookup(type_tag(expr))
    if handler is not None:
        return handler(expr[1:], env, forms, evaluate0, is_tail_call)

    if isinstance(expr, Symbol) and expr in forms:
        logger.info("%s is a special form", expr)
        return expr

    if is_self_evaluating(expr):
        return expr
    if is_variable(expr):
        return env.lookup(expr)
    if is_application(expr):
        procedure = evaluate0(expr[0], env, forms)
        arguments = eval_operands(expr[1:], env, forms, evaluate0)
        return apply_procedure(procedure, arguments, forms, evaluate0, is_tail_call)

    raise UnknownExpressionError(f"Unknown expression type: {expr!r}")


def apply(
    procedure: LispValue,
    arguments: list[LispValue],
    forms: SpecialFormRegistry | None = None,
) -> LispValue:
    """Apply a procedure value to already evaluated arguments."""
    if forms is None:
        forms = SPECIAL_FORMS
    return apply_procedure(procedure, list(arguments), forms, evaluate0)


def evaluate_sequence(
    exprs: list[SExpression], env: Environment, forms: SpecialFormRegistry | None = None
) -> LispValue:
    if forms is None:
        forms = SPECIAL_FORMS
    return trampoline(eval_sequence(exprs, env, forms, evaluate0, True), forms, evaluate0)


def evaluate_operands(
    exprs: list[SExpression], env: Environment, forms: SpecialFormRegistry | None = None
) -> list[LispValue]:
    if forms is None:
        forms = SPECIAL_FORMS
    return eval_operands(exprs, env, forms, evaluate0)
