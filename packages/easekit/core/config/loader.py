"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from easekit.core.config.models import AppConfig
from easekit.core.curves.library import build_default_registry
from easekit.core.curves.registry import CurveRegistry
from easekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")

    logger.debug("Loaded %s config from %s", fmt, path)
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to ``AppConfig.default_path()``; a missing default
              file yields all defaults.

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    global _app_config_cache

    if path is None:
        if _app_config_cache is not None:
            return _app_config_cache

        default_path = AppConfig.default_path()
        if default_path.exists():
            config = AppConfig.model_validate(load_config(default_path))
        else:
            logger.debug("No config at %s, using defaults", default_path)
            config = AppConfig()

        _app_config_cache = config
        return config

    return AppConfig.model_validate(load_config(path))


def clear_config_cache() -> None:
    """Forget the cached default AppConfig."""
    global _app_config_cache
    _app_config_cache = None


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def build_registry(config: AppConfig | None = None) -> CurveRegistry:
    """Build the default curve registry using configured sampling defaults.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()
    return build_default_registry(
        default_samples=config.sampling.default_samples,
        endpoint=config.sampling.endpoint,
    )
