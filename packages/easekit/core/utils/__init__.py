"""Shared utilities for easekit."""

from easekit.core.utils.logging import configure_logging, get_logger
from easekit.core.utils.random import get_shared_random, reset_shared_random, set_shared_random

__all__ = [
    "configure_logging",
    "get_logger",
    "get_shared_random",
    "reset_shared_random",
    "set_shared_random",
]
