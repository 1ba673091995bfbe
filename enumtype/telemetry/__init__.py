"""Logging subsystem package."""
from .logging_setup import JsonFormatter, configure_logging

__all__ = ["JsonFormatter", "configure_logging"]
