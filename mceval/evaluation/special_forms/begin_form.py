from mceval import EvaluatorFn
from mceval import SExpression, LispValue
from mceval.types.environment import Environment
from mceval.evaluation.sequence import eval_sequence


def begin_form(
    tail: list[SExpression],
    env: Environment,
    forms,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    return eval_sequence(tail, env, forms, evaluate_fn, is_tail_call)
