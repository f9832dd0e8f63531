"""Primitive procedures for the mceval runtime environment.

Each primitive is a plain Python function taking positional arguments. The
evaluator does not check their arity; calling one with the wrong number of
arguments raises whatever the function itself raises (usually TypeError).
"""
from __future__ import annotations
from typing import Callable

from mceval import LispValue
from mceval.printer import to_string
from mceval.types.environment import Environment
from mceval.types.errors import DuplicateFormError
from mceval.types.nil import Nil
from mceval.types.procedure import Primitive
from mceval.types.symbol import Symbol
from mceval.evaluation.registry import SpecialFormRegistry
from mceval.evaluation.special_forms import SPECIAL_FORMS


# -------------------------------
# Pairs and lists
# -------------------------------
def car(pair: LispValue) -> LispValue:
    """First element of a non-empty list or dotted pair."""
    if isinstance(pair, (list, tuple)) and pair:
        return pair[0]
    raise TypeError(f"car: not a pair: {to_string(pair)}")


def cdr(pair: LispValue) -> LispValue:
    """Everything after the first element; Nil once a list is exhausted."""
    if isinstance(pair, tuple) and len(pair) == 2:
        return pair[1]
    if isinstance(pair, list) and pair:
        return pair[1:] if len(pair) > 1 else Nil
    raise TypeError(f"cdr: not a pair: {to_string(pair)}")


def cons(head: LispValue, tail: LispValue) -> LispValue:
    """Prepend `head` to a list, or build a dotted pair for any other tail."""
    if tail is Nil:
        return [head]
    if isinstance(tail, list):
        return [head] + tail
    return (head, tail)


def null(value: LispValue) -> bool:
    return value is Nil or (isinstance(value, list) and not value)


def list_builtin(*items: LispValue) -> LispValue:
    return list(items) if items else Nil


def eq(a: LispValue, b: LispValue) -> bool:
    """Identity for compound values, equality for symbols, numbers and Nil."""
    if a is b:
        return True
    if isinstance(a, (Symbol, int, float)) and not isinstance(a, bool):
        return type(a) is type(b) and a == b
    return False


def logical_not(value: LispValue) -> bool:
    return value is False


# -------------------------------
# Output
# -------------------------------
def display(value: LispValue) -> LispValue:
    print(to_string(value, display=True), end="")
    return Nil


def newline() -> LispValue:
    print()
    return Nil


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: LispValue) -> LispValue:
    return sum(args)


def sub(first: LispValue, *rest: LispValue) -> LispValue:
    """Subtract the rest from the first; unary negation for one arg."""
    if not rest:
        return -first
    result = first
    for x in rest:
        result -= x
    return result


def mul(*args: LispValue) -> LispValue:
    result = 1
    for x in args:
        result *= x
    return result


def div(first: LispValue, *rest: LispValue) -> LispValue:
    """Divide left to right; one argument gives the reciprocal."""
    if not rest:
        return 1 / first
    result = first
    for x in rest:
        result /= x
    return result


def num_eq(first: LispValue, *rest: LispValue) -> bool:
    return all(first == x for x in rest)


def lt(*args: LispValue) -> bool:
    """Chainable less-than."""
    return all(a < b for a, b in zip(args, args[1:]))


def gt(*args: LispValue) -> bool:
    """Chainable greater-than."""
    return all(a > b for a, b in zip(args, args[1:]))


PRIMITIVES: dict[str, Callable[..., LispValue]] = {
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "null?": null,
    "list": list_builtin,
    "eq?": eq,
    "not": logical_not,
    "display": display,
    "newline": newline,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "<": lt,
    ">": gt,
}


def install_primitive(
    env: Environment,
    name: str | Symbol,
    fn: Callable[..., LispValue],
    forms: SpecialFormRegistry | None = None,
) -> Symbol:
    """Bind `name` to a Primitive wrapping `fn` in the global frame of `env`."""
    if forms is None:
        forms = SPECIAL_FORMS
    sym = name if isinstance(name, Symbol) else Symbol(name)
    if sym in forms:
        raise DuplicateFormError(f"{sym} names a special form and cannot be a primitive")
    env.global_env().define(sym, Primitive(sym.id, fn))
    return sym


def register(env: Environment, forms: SpecialFormRegistry | None = None) -> None:
    """Install every builtin primitive into the global frame of `env`."""
    for name, fn in PRIMITIVES.items():
        install_primitive(env, name, fn, forms)
