from __future__ import annotations

"""Configuration utilities for timesamplings.

Two coordinate systems, ``source`` and ``destination``, describe the
samplers used by the translation commands.  Each names the stages it is
built from (epoch, sampling rate, decimation and shift).  Instances can be
populated from environment variables or from YAML/JSON files with matching
nested keys.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.downsample import Alignment
from .utils.logging import DEFAULT_FORMAT


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


class CoordinateSettings(SectionModel):
    """Stages describing one coordinate system."""

    epoch: Optional[datetime] = None
    rate: Optional[float] = Field(default=None, gt=0)
    factor: Optional[float] = Field(default=None, ge=1)
    alignment: Alignment = Alignment.LEFT
    shift: Optional[float] = None

    @field_validator("alignment", mode="before")
    @classmethod
    def _coerce_alignment(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Alignment.parse(value)
        return value

    def is_empty(self) -> bool:
        return all(
            getattr(self, name) is None for name in ("epoch", "rate", "factor", "shift")
        )


class LoggingSettings(SectionModel):
    """Logger level and format used by the command line interface."""

    level: str = "INFO"
    format: str = DEFAULT_FORMAT

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    source: CoordinateSettings = Field(default_factory=CoordinateSettings)
    destination: CoordinateSettings = Field(default_factory=CoordinateSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="TIMESAMPLINGS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``TIMESAMPLINGS_*`` environment variables only."""

        return cls()


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)


__all__ = ["CoordinateSettings", "LoggingSettings", "Settings", "load_settings"]
