import pytest

from mceval.builtin.env_builtin import register
from mceval.evaluation.special_forms import build_special_forms
from mceval.interpreter import Interpreter
from mceval.types.environment import Environment


@pytest.fixture
def forms():
    """Fresh special-form registry, so registrations do not leak between tests."""
    return build_special_forms()


@pytest.fixture
def env(forms):
    """Fresh global environment with builtin primitives installed."""
    e = Environment.empty()
    register(e, forms)
    return e


@pytest.fixture
def interp():
    return Interpreter()
