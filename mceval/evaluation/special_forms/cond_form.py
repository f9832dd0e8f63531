from mceval import EvaluatorFn
from mceval import SExpression, LispValue
from mceval.types.environment import Environment
from mceval.evaluation.derived import cond_to_if


def cond_form(
    tail: list[SExpression],
    env: Environment,
    forms,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(cond (test expr ...) ... (else expr ...)), evaluated via its if expansion."""
    return evaluate_fn(cond_to_if(tail), env, forms, is_tail_call)
