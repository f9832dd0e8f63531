from mceval import EvaluatorFn, SExpression, LispValue
from mceval.types.environment import Environment
from mceval.types.errors import MalformedFormError


def eval_sequence(
    exprs: list[SExpression],
    env: Environment,
    forms,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Evaluate `exprs` in order; the last one gives the value and keeps tail position."""
    if not exprs:
        raise MalformedFormError("Cannot evaluate an empty sequence")
    for e in exprs[:-1]:
        evaluate_fn(e, env, forms)
    return evaluate_fn(exprs[-1], env, forms, is_tail_call)


def eval_operands(
    exprs: list[SExpression],
    env: Environment,
    forms,
    evaluate_fn: EvaluatorFn,
) -> list[LispValue]:
    """Evaluate operands strictly left to right."""
    values = []
    for e in exprs:
        values.append(evaluate_fn(e, env, forms))
    return values
