import logging

from mceval import SExpression, LispValue, EvaluatorFn
from mceval.types.errors import MalformedFormError
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol
from mceval.modules.source_loader import SourceLoader

logger = logging.getLogger(__name__)


def make_load_form(loader: SourceLoader):
    """Build the `load` handler around a source of expressions."""

    def load_form(
        tail: list[SExpression], env: Environment, forms, evaluate_fn: EvaluatorFn, _: bool = False
    ) -> LispValue:
        """(load "path") evaluates every expression of the source in `env`.

        Evaluates to the operand as written.
        """
        if len(tail) != 1 or not isinstance(tail[0], (str, Symbol)):
            raise MalformedFormError("load expects exactly one source location")
        location = tail[0]
        logger.debug("loading %s", location)
        count = 0
        for expr in loader.read_expressions(str(location)):
            evaluate_fn(expr, env, forms)
            count += 1
        logger.debug("loaded %d expressions from %s", count, location)
        return location

    return load_form
