from mceval import EvaluatorFn
from mceval import SExpression, LispValue
from mceval.types.errors import MalformedFormError
from mceval.types.environment import Environment
from mceval.evaluation.syntax import is_true


def if_form(
    tail: list[SExpression],
    env: Environment,
    forms,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MalformedFormError("if requires a test, a consequent and an optional alternative")

    if is_true(evaluate_fn(tail[0], env, forms)):
        return evaluate_fn(tail[1], env, forms, is_tail_call)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env, forms, is_tail_call)
    return False
