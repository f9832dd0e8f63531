"""External representation of values, as the REPL and `display` show them."""

from __future__ import annotations

from io import StringIO

from mceval import LispValue
from mceval.types.nil import Nil


def _write(value: LispValue, buffer: StringIO, display: bool) -> None:
    if value is True:
        buffer.write("#t")
    elif value is False:
        buffer.write("#f")
    elif value is Nil:
        buffer.write("()")
    elif isinstance(value, str):
        buffer.write(value if display else '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"')
    elif isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer, display)
        buffer.write(")")
    elif isinstance(value, tuple) and len(value) == 2:
        head, tail = value
        buffer.write("(")
        _write(head, buffer, display)
        buffer.write(" . ")
        _write(tail, buffer, display)
        buffer.write(")")
    else:
        buffer.write(str(value))


def to_string(value: LispValue, display: bool = False) -> str:
    """Render `value`; with `display` strings are written without quotes."""
    with StringIO() as buffer:
        _write(value, buffer, display)
        return buffer.getvalue()
