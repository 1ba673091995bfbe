"""Typed settings models for applications embedding enumtype.

The package itself is configuration-free; these models only drive the
logging setup in :mod:`enumtype.telemetry`. pydantic validates the YAML
payload and hands typed objects to the caller.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Logger name, level and destinations used by ``configure_logging``."""

    level: str = Field("INFO")
    log_dir: Optional[Path] = None
    json_format: bool = True
    logger_name: str = Field("enumtype", min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        """Accept standard level names in any case."""

        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class EnumTypeConfig(BaseModel):
    """Root settings document."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["EnumTypeConfig", "LoggingConfig"]
