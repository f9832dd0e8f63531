"""Derived forms: surface syntax rewritten into core forms before evaluation.

`cond_to_if` turns

    (cond (p1 e1 ...) (p2 e2 ...) (else e3 ...))

into

    (if p1 (begin e1 ...) (if p2 (begin e2 ...) (begin e3 ...)))

The rewrite is purely syntactic; nothing here evaluates anything.
"""

from __future__ import annotations

from mceval import SExpression
from mceval.types.errors import MalformedFormError, MisplacedElseError
from mceval.evaluation.syntax import ELSE, make_if, make_no_value, sequence_to_exp


def _is_else_clause(clause: list) -> bool:
    return clause[0] == ELSE


def _check_clause(clause: SExpression) -> list:
    if not isinstance(clause, list) or len(clause) < 2:
        raise MalformedFormError(f"cond clause needs a test and at least one expression: {clause}")
    return clause


def cond_to_if(clauses: list[SExpression]) -> SExpression:
    if not clauses:
        return make_no_value()
    first = _check_clause(clauses[0])
    rest = clauses[1:]
    if _is_else_clause(first):
        if rest:
            raise MisplacedElseError("else clause isn't last in cond")
        return sequence_to_exp(first[1:])
    return make_if(first[0], sequence_to_exp(first[1:]), cond_to_if(rest))
