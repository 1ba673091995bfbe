"""Core primitives shared across all subpackages.

This module aggregates the underlying-value accessor, common type aliases and
error classes. Higher level packages import from here to avoid circular
dependencies.
"""

from . import errors, types, underlying

__all__ = ["errors", "types", "underlying"]
