import pytest

from minima.interpreter import Interpreter
from minima.types.environment import initial_environment

# Shared fixtures. Every test gets its own environment value; since
# environments are immutable lists nothing can leak between tests anyway.

NO_COLOR = {"sugar": True, "color_atoms": False, "color_truth": False, "color_forms": False}


@pytest.fixture
def env():
    """The truth bindings: ((t.t).((nil.nil).nil))."""
    return initial_environment()


@pytest.fixture
def interp():
    """Interpreter that accepts the loose list notation."""
    return Interpreter(sugar=True)


@pytest.fixture
def canonical():
    """Interpreter that accepts dotted-pair notation only."""
    return Interpreter()


@pytest.fixture
def no_color():
    return dict(NO_COLOR)
