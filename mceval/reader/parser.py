"""
  Reader: lexer and parser for mceval source text.

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - () and nil -> Nil
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f -> True / False
    - 'x -> [quote, x]
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional, Iterable

from mceval import SExpression
from mceval.types.errors import MceIncompleteInputError, MceSyntaxError
from mceval.types.nil import Nil
from mceval.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)',  # fallback: symbols and numbers
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

BOOLEANS = {"#t": True, "#true": True, "#f": False, "#false": False}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise MceIncompleteInputError(f"Unterminated string at {pos}")
            raise MceSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def parse_atom(text: str) -> SExpression:
    if text in BOOLEANS:
        return BOOLEANS[text]
    if text.lower() == "nil":
        return Nil
    if NUMBER_RE.fullmatch(text):
        if text.lstrip("+-").isdigit():
            return int(text)
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Next expression, or None when the input is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            # literal_eval rejects raw newlines inside a string literal
            return ast.literal_eval(tok_val.replace("\n", "\\n"))

        if tok_type == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise MceIncompleteInputError("Unexpected EOF after quote")
            return [QUOTE, expr]

        if tok_type == "lparen":
            items = []
            while True:
                kind, _ = self.peek()
                if kind is None:
                    raise MceIncompleteInputError("Unmatched '('")
                if kind == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return items if items else Nil

        if tok_type == "rparen":
            raise MceSyntaxError("Unexpected ')'")

        raise MceSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Parse every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
