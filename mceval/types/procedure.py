"""Procedure values: user-defined closures and wrapped host callables."""

from __future__ import annotations

from typing import Callable

from mceval import SExpression
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol


class Procedure:
    """A compound procedure: parameters, a non-empty body and its defining env."""

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: list[Symbol], body: list[SExpression], env: Environment):
        self.parameters: list[Symbol] = list(parameters)
        self.body: list[SExpression] = list(body)
        # Shared reference to the defining environment, never a copy
        self.env: Environment = env

    def __str__(self) -> str:
        return "<compound-procedure (" + " ".join(str(p) for p in self.parameters) + ")>"

    def __repr__(self) -> str:
        return str(self)


class Primitive:
    """A procedure implemented by a Python callable taking positional arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., object]):
        self.name = name
        self.fn = fn

    def __str__(self) -> str:
        return f"<primitive-procedure {self.name}>"

    def __repr__(self) -> str:
        return str(self)
