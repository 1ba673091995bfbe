"""Shared type aliases for readability and contract enforcement.

Bit masks and underlying values are both plain ints at runtime; the aliases
keep signatures honest about which one a function expects.
"""
from __future__ import annotations

from enum import Enum
from typing import NewType, TypeAlias, TypeVar

EnumT = TypeVar("EnumT", bound=Enum)

Underlying: TypeAlias = int
BitMask = NewType("BitMask", int)
