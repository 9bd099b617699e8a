"""Shared pytest fixtures for easekit tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from easekit.core.config.loader import clear_config_cache
from easekit.core.utils.random import get_shared_random, set_shared_random

# ============================================================================
# Global State Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Iterator[None]:
    """Isolate the cached default AppConfig between tests."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def _restore_shared_random() -> Iterator[None]:
    """Restore the process-wide generator after each test."""
    original = get_shared_random()
    yield
    set_shared_random(original)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Close and restore root logger handlers replaced by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
