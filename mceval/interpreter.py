from __future__ import annotations
from typing import Callable

from mceval import LispValue
from mceval.reader.parser import lex, TokenStream
from mceval.types.environment import Environment
from mceval.types.errors import DuplicateFormError
from mceval.types.nil import Nil
from mceval.types.symbol import Symbol
from mceval.builtin.env_builtin import register, install_primitive
from mceval.evaluation.evaluator import evaluate
from mceval.evaluation.registry import FormHandler
from mceval.evaluation.special_forms import build_special_forms
from mceval.modules.source_loader import SourceLoader


class Interpreter:
    """
    Reads and evaluates mceval code against one global environment.
    Definitions persist across calls; each instance has its own registry
    of special forms.
    """

    def __init__(self, prelude: str | None = None, loader: SourceLoader | None = None):
        self.forms = build_special_forms(loader)
        self.env: Environment = Environment.empty()
        register(self.env, self.forms)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            evaluate(expr, self.env, self.forms)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; the value of the last one, or Nil."""
        result: LispValue = Nil
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            result = evaluate(expr, self.env, self.forms)
        return result

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every expression in `code` and return all of their values."""
        stream = TokenStream(lex(code))
        return [evaluate(expr, self.env, self.forms) for expr in stream.parse_all()]

    def load(self, location: str) -> LispValue:
        return evaluate([Symbol("load"), location], self.env, self.forms)

    def register_form(self, tag: str | Symbol, handler: FormHandler) -> Symbol:
        """Add a special form; names already bound as globals are refused."""
        sym = tag if isinstance(tag, Symbol) else Symbol(tag)
        if self.env.global_env().is_locally_defined(sym):
            raise DuplicateFormError(f"{sym} is bound as a variable and cannot become a special form")
        return self.forms.register(sym, handler)

    def install_primitive(self, name: str | Symbol, fn: Callable[..., LispValue]) -> Symbol:
        return install_primitive(self.env, name, fn, self.forms)
