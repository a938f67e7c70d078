import pytest

from symbolic_differentiation import VariableRegistry, build, tokenize
from symbolic_differentiation.logging_system import LogLevel, configure_logging


@pytest.fixture
def registry():
    return VariableRegistry()


@pytest.fixture
def parse(registry):
    """Text -> tree, with variables interned in the test's own registry"""
    def _parse(text):
        return build(tokenize(text, registry))
    return _parse


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LogLevel.SILENT)
    yield
    configure_logging(LogLevel.SILENT)
