from mceval import SExpression, LispValue, EvaluatorFn
from mceval.types.errors import MalformedFormError


def quote_form(
    tail: list[SExpression], env, forms, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    if len(tail) != 1:
        raise MalformedFormError("quote expects exactly 1 argument")
    return tail[0]
