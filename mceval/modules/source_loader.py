from __future__ import annotations
from pathlib import Path
from typing import Iterator, Optional, Protocol

from mceval import SExpression
from mceval.config import get_load_roots
from mceval.reader.parser import lex, TokenStream


class SourceLoader(Protocol):
    def read_expressions(self, location: str) -> Iterator[SExpression]: ...


def resolve_location(location: str) -> Optional[Path]:
    p = Path(location)
    if p.is_file():
        return p
    if p.is_absolute():
        return None
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return None


def read_source(code: str) -> Iterator[SExpression]:
    """Parse `code` lazily, one expression at a time."""
    return TokenStream(lex(code)).parse_all()


class FileLoader:
    """Reads expressions from files on disk, searching MCEVAL_LOAD_PATH."""

    def read_expressions(self, location: str) -> Iterator[SExpression]:
        p = resolve_location(location)
        if p is None:
            raise FileNotFoundError(f"Cannot find source '{location}' in cwd or MCEVAL_LOAD_PATH")
        return read_source(p.read_text(encoding='utf-8'))


class StringLoader:
    """Serves sources from an in-memory mapping of location -> code."""

    def __init__(self, sources: dict[str, str]):
        self.sources = dict(sources)

    def read_expressions(self, location: str) -> Iterator[SExpression]:
        if location not in self.sources:
            raise FileNotFoundError(f"No source registered for '{location}'")
        return read_source(self.sources[location])
