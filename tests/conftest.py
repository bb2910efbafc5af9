import pytest

from glisp.builtin.core import register
from glisp.interpreter import Interpreter
from glisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with the core natives registered."""
    e = Environment(name="global")
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter(save_eval=False)
