import pytest

from lispy.builtin.env_builtin import make_root_environment
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env() -> Environment:
    """Fresh root environment with builtins loaded."""
    return make_root_environment()


@pytest.fixture
def interp() -> Interpreter:
    """Interpreter without the prelude, so only builtins are bound."""
    return Interpreter(prelude=None)
