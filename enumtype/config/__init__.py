"""Configuration loading and validation package."""

from .loader import load_config
from .models import EnumTypeConfig, LoggingConfig

__all__ = ["EnumTypeConfig", "LoggingConfig", "load_config"]
