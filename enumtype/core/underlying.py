"""Conversion between enum members and their underlying integer values.

Every operator in the package converts through :func:`to_underlying` and back
through :func:`from_underlying`, so a change to how members map onto integers
is made here and nowhere else.
"""
from __future__ import annotations

from enum import Enum
from typing import Type

from .types import EnumT, Underlying


def to_underlying(value: Enum) -> Underlying:
    """Return the integer value behind ``value``, unchanged."""

    if not isinstance(value, Enum):
        raise TypeError(f"Expected an enum member, got {type(value).__name__}")
    return value.value


def from_underlying(enum_type: Type[EnumT], raw: Underlying) -> EnumT:
    """Return the member of ``enum_type`` whose underlying value is ``raw``.

    Plain enums raise :class:`ValueError` for values without a member; enums
    declared as bit sets resolve any integer to a (pseudo-)member.
    """

    return enum_type(raw)


__all__ = ["from_underlying", "to_underlying"]
