import pytest

from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment

# Settings are read from the process environment at call time. The autouse
# fixture below makes every test start from the documented defaults so a
# developer's shell (e.g. MINILISP_MAX_CALL_DEPTH) never leaks into results.

CONFIG_VARS = (
    "MINILISP_MAX_CALL_DEPTH",
    "MINILISP_LOG_LEVEL",
    "MINILISP_REPL_HOST",
    "MINILISP_REPL_PORT",
)


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    for var in CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh session environment."""
    return Environment()


@pytest.fixture
def interp():
    """Fresh interpreter with an empty session."""
    return Interpreter()
