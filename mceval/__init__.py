# Core type aliases for the mceval data model.
# Code and data share plain Python types: lists for compound forms, Symbol for
# identifiers, int/float/str/bool for atoms. There is no explicit Cons type.
#
# Naming guidance:
# - SExpression: syntactic forms handed to the evaluator (code-as-data).
# - LispValue:  values produced by evaluation.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special-form handlers
EvaluatorFn = Callable[..., LispValue]
