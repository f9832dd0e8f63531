"""Extensible dispatch table from special-form tags to their handlers.

A tag can be registered once. Later attempts are rejected rather than
overwriting the existing handler, so built-in forms cannot be replaced.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from mceval import SExpression, LispValue
from mceval.types.errors import DuplicateFormError
from mceval.types.symbol import Symbol

logger = logging.getLogger(__name__)

# handler(operands, env, forms, evaluate_fn, is_tail_call) -> value
FormHandler = Callable[..., LispValue]


class SpecialFormRegistry:
    """Maps Symbols to special-form handlers."""

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: dict[Symbol, FormHandler] = {}

    def register(self, tag: Symbol | str, handler: FormHandler) -> Symbol:
        if isinstance(tag, str):
            tag = Symbol(tag)
        if tag in self._handlers:
            raise DuplicateFormError(f"Special form {tag} is already registered")
        self._handlers[tag] = handler
        logger.debug("registered special form %s", tag)
        return tag

    def lookup(self, tag: SExpression) -> Optional[FormHandler]:
        """Handler for `tag`, or None when it is not a registered form."""
        if not isinstance(tag, Symbol):
            return None
        return self._handlers.get(tag)

    def tags(self) -> Iterator[Symbol]:
        return iter(self._handlers)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, Symbol) and tag in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
