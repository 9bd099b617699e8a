"""Configuration models for easekit."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from easekit.core.curves.registry import DEFAULT_SAMPLES
from easekit.core.utils.logging import DEFAULT_FORMAT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_FORMAT
    structured: bool = Field(default=False, description="Emit JSON log records")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class SamplingConfig(BaseModel):
    """Defaults for sampling curves into points."""

    model_config = ConfigDict(extra="forbid")

    default_samples: int = Field(
        default=DEFAULT_SAMPLES, ge=2, description="Sample count when none is requested"
    )
    endpoint: bool = Field(default=True, description="Include t=1.0 in sampled grids")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    sampling: SamplingConfig = SamplingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("easekit.yaml")
