import pytest

from swisp.builtin.env_builtin import standard_environment
from swisp.interpreter import Interpreter


# Most tests evaluate source text against a fresh standard environment.
# `interp` shares its root environment with `env`, so definitions made through
# one are visible through the other.


@pytest.fixture
def env():
    return standard_environment()


@pytest.fixture
def interp(env):
    return Interpreter(env=env)
