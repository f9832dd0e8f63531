from mceval import EvaluatorFn
from mceval import SExpression, LispValue
from mceval.types.errors import MalformedFormError
from mceval.types.environment import Environment
from mceval.types.procedure import Procedure
from mceval.types.nil import Nil
from mceval.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    forms,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    # (lambda (params) body...) needs at least one body expression.
    if len(tail) < 2:
        raise MalformedFormError("lambda requires a parameter list and a body")

    params = [] if tail[0] is Nil else tail[0]
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalformedFormError(f"lambda parameters must be a list of symbols, got {params!r}")
    if len(set(params)) != len(params):
        raise MalformedFormError(f"lambda parameters must be distinct: {params!r}")

    return Procedure(params, tail[1:], env)
