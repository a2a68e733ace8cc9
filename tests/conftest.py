import pytest

from quill.builtin.env_builtin import builtin
from quill.interpreter import Interpreter


@pytest.fixture
def scope():
    """Return a fresh builtin scope for each test."""
    return builtin()


@pytest.fixture
def interp():
    return Interpreter()
