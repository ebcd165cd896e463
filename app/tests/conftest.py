"""Shared fixtures for consoler tests."""

import logging
from unittest.mock import MagicMock

import pytest
import structlog

from consoler import Consoler, RouteRegistry


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Suppress all log output during tests.

    Loggers are not cached so structlog.testing.capture_logs sees every event.
    """
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(
        format="%(message)s",
        level=logging.CRITICAL + 1,
        force=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def consoler_factory():
    """Factory for creating Consoler engines from a route and invocation.

    Returns:
        Callable that builds a Consoler from a template and tokens
    """

    def _factory(route: str, cli=None):
        return Consoler(route, cli if cli is not None else [])

    return _factory


@pytest.fixture
def route_registry():
    """Empty RouteRegistry for registration tests."""
    return RouteRegistry(namespace="test")


@pytest.fixture
def mock_handler():
    """Mock route handler returning a fixed value."""
    handler = MagicMock(return_value="handled")
    handler.__name__ = "mock_handler"
    return handler
