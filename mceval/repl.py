"""Read-eval-print driver: python -m mceval [files ...]"""

from __future__ import annotations

import argparse
import logging
import sys

from mceval.config import get_log_level
from mceval.evaluation.evaluator import evaluate
from mceval.interpreter import Interpreter
from mceval.printer import to_string
from mceval.reader.parser import lex, TokenStream
from mceval.types.errors import MceIncompleteInputError, MceSyntaxError

logger = logging.getLogger(__name__)

INPUT_PROMPT = ";;; M-Eval input:"
OUTPUT_PROMPT = ";;; M-Eval value:"


def _read_expression(stream_in) -> tuple[bool, object]:
    """Read lines until they hold one complete expression. (eof, exprs)"""
    buffer = ""
    while True:
        line = stream_in.readline()
        if not line:
            return True, None
        buffer += line
        try:
            exprs = list(TokenStream(lex(buffer)).parse_all())
        except MceIncompleteInputError:
            continue
        if exprs:
            return False, exprs


def run(interp: Interpreter, stream_in=sys.stdin, stream_out=sys.stdout) -> None:
    while True:
        print(f"\n\n{INPUT_PROMPT}", file=stream_out)
        try:
            eof, exprs = _read_expression(stream_in)
        except MceSyntaxError as ex:
            print(f"Syntax error: {ex}", file=stream_out)
            continue
        if eof:
            break
        for expr in exprs:
            try:
                value = evaluate(expr, interp.env, interp.forms)
            except Exception as ex:
                logger.debug("evaluation aborted", exc_info=True)
                print(f"Error: {type(ex).__name__}: {ex}", file=stream_out)
                break
            print(f"\n{OUTPUT_PROMPT}", file=stream_out)
            print(to_string(value), file=stream_out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mceval", description="Metacircular evaluator REPL")
    parser.add_argument("files", nargs="*", help="source files to load before the prompt")
    parser.add_argument("--no-repl", action="store_true", help="exit after loading files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    for path in args.files:
        interp.load(path)
    if not args.no_repl:
        run(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
