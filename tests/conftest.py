import pytest

from lispy.builtin.env_builtin import standard_env
from lispy.interpreter import Interpreter
from lispy.types.procedure import Primitive
from lispy.types.symbol import Symbol


@pytest.fixture
def env():
    return standard_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def trace(interp):
    """Bind (trace x) in the interpreter: records x and returns it unchanged."""
    calls = []

    def record(x):
        calls.append(x)
        return x

    interp.env.define(Symbol("trace"), Primitive("trace", record))
    return calls
