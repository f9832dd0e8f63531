from mceval import EvaluatorFn
from mceval import SExpression, LispValue
from mceval.types.errors import MalformedFormError
from mceval.types.environment import Environment
from mceval.evaluation.registry import SpecialFormRegistry
from mceval.evaluation.special_forms.define_form import check_variable_name


def set_form(
    tail: list[SExpression],
    env: Environment,
    forms: SpecialFormRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    if len(tail) != 2:
        raise MalformedFormError("set! requires exactly 2 arguments: (set! var value)")
    name = check_variable_name(tail[0], forms, "set!")
    value = evaluate_fn(tail[1], env, forms)
    env.set(name, value)
    return name
