"""Pytest configuration shared by all test suites.

This configuration ensures:
1. Tests run against the TESTING environment (JSON logs)
2. Cached singletons (settings, logger, registry) do not leak between tests
3. A logger double is available for code that logs through LoggerProtocol
"""

import os
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("ENVIRONMENT", "testing")

from src.core.config import get_settings  # noqa: E402
from src.core.container import get_handler_registry, get_logger  # noqa: E402
from src.core.validation import ValidationErrorBuilder  # noqa: E402


@pytest.fixture(autouse=True)
def clear_singletons():
    """Clear cached singletons before and after each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_handler_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_handler_registry.cache_clear()


@pytest.fixture
def mock_logger():
    """Logger double whose bind()/with_context() return the same double.

    Lets tests assert on log calls made through a bound logger.
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def builder():
    """Fresh, empty ValidationErrorBuilder."""
    return ValidationErrorBuilder.create()
