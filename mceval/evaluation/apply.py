"""Application engine for mceval.

Applies the two procedure variants:
- Primitive: call the wrapped Python callable with the argument values. Any
  exception it raises propagates unchanged.
- Procedure: bind parameters to arguments in a new frame in front of the
  captured environment and evaluate the body there. In tail position the
  body is not evaluated here; a TailCall is returned for the trampoline.
"""

from __future__ import annotations

from mceval import EvaluatorFn, LispValue
from mceval.types.errors import UnknownProcedureError
from mceval.types.procedure import Primitive, Procedure
from mceval.types.tail_call import TailCall
from mceval.evaluation.sequence import eval_sequence


def trampoline(result: LispValue, forms, evaluate_fn: EvaluatorFn) -> LispValue:
    """Step pending tail calls until a plain value comes out."""
    while isinstance(result, TailCall):
        result = eval_sequence(
            result.procedure.body, result.env, forms, evaluate_fn, True
        )
    return result


def apply_procedure(
    procedure: LispValue,
    args: list[LispValue],
    forms,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    if isinstance(procedure, Primitive):
        return procedure.fn(*args)
    if isinstance(procedure, Procedure):
        new_env = procedure.env.extend(procedure.parameters, args)
        if is_tail_call:
            return TailCall(procedure, new_env)
        return trampoline(TailCall(procedure, new_env), forms, evaluate_fn)
    raise UnknownProcedureError(f"Unknown procedure type: {procedure!r}")
