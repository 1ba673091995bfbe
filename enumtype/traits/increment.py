"""Opt-in increment and decrement for enumerations.

Python has no ``++``/``--``; the operations are exposed as functions that
return the neighbouring member. :class:`enumtype.traits.ref.EnumRef` provides
the prefix/postfix forms that update a held value in place.

Only enum types decorated with :func:`declare_increment_decrement_operators`
may be stepped. Stepping past the last member is not checked here: a plain
enum raises its own ``ValueError`` for a value without a member, a bit-set
enum simply yields a pseudo-member.
"""
from __future__ import annotations

from enum import Enum
from typing import Type

from enumtype.core.errors import NotIncrementableError
from enumtype.core.types import EnumT
from enumtype.core.underlying import from_underlying, to_underlying

from .registry import INCREMENTABLE, declare_trait, is_enum_incrementable


def declare_increment_decrement_operators(enum_type: Type[EnumT]) -> Type[EnumT]:
    """Class decorator enabling :func:`increment` and :func:`decrement`.

    Example::

        @declare_increment_decrement_operators
        class Direction(Enum):
            NORTH = 0
            EAST = 1
            SOUTH = 2
            WEST = 3

        increment(Direction.NORTH)  # Direction.EAST
    """

    declare_trait(enum_type, INCREMENTABLE)
    return enum_type


def _require_incrementable(value: Enum) -> type:
    enum_type = type(value)
    if not is_enum_incrementable(enum_type):
        raise NotIncrementableError(
            f"{enum_type.__qualname__} is not declared incrementable"
        )
    return enum_type


def increment(value: EnumT) -> EnumT:
    """Return the member whose underlying value is one above ``value``."""

    enum_type = _require_incrementable(value)
    return from_underlying(enum_type, to_underlying(value) + 1)


def decrement(value: EnumT) -> EnumT:
    """Return the member whose underlying value is one below ``value``."""

    enum_type = _require_incrementable(value)
    return from_underlying(enum_type, to_underlying(value) - 1)


__all__ = ["declare_increment_decrement_operators", "decrement", "increment"]
