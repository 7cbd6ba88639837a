"""Shared fixtures for monadic tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from monadic import _config
from monadic._logging import clear_log_hooks


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return 'asyncio'


@pytest.fixture(autouse=True)
def cleanup_hooks() -> Generator[None]:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture
def reset_config() -> Generator[None]:
    """Forget any init() call made by the test."""
    saved = _config._config
    _config._config = None
    yield
    _config._config = saved


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Put the root logger and structlog back the way the test found them."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
