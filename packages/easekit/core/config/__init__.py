"""Configuration management for easekit."""

from easekit.core.config.loader import (
    build_registry,
    clear_config_cache,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from easekit.core.config.models import AppConfig, LoggingConfig, SamplingConfig

__all__ = [
    # Loaders
    "build_registry",
    "clear_config_cache",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "LoggingConfig",
    "SamplingConfig",
]
