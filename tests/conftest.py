import pytest

from minipyth.interpreter import Interpreter
from minipyth.runtime_context import reset_iteration_limit


# Interpreter(iteration_limit=...) writes a process-global setting; every test
# starts from the environment default with MINIPYTH_ITERATION_LIMIT unset.
@pytest.fixture(autouse=True)
def _fresh_runtime_context(monkeypatch):
    monkeypatch.delenv("MINIPYTH_ITERATION_LIMIT", raising=False)
    reset_iteration_limit()
    yield
    reset_iteration_limit()


@pytest.fixture
def interp():
    """Fresh interpreter with the default evaluator."""
    return Interpreter()
