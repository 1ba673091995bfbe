"""Bitwise and additive operators attached to opted-in enumerations.

:func:`declare_enum_as_bit_set` turns an integer-valued enum into a flag type:
``|``, ``&``, ``^`` and ``~`` convert both operands to their underlying
integers, apply the native operator and convert back. In-place forms
(``|=``, ``&=``, ``^=``) follow from Python's fallback to the binary
operators.

Combinations such as ``A | C`` rarely have a declared member, so the
decorator also installs a ``_missing_`` hook that creates one pseudo-member
per new integer value, the same way ``enum.Flag`` did before Python 3.11.
The operators always resolve their results through that pseudo-member
machinery, so a ``_missing_`` written on the enum itself only affects
explicit ``Enum(raw)`` lookups.

:func:`declare_enum_as_addable` marks an "offset" enum whose members can be
added onto members of any other enum, producing a member of that other enum.
"""
from __future__ import annotations

import logging
import operator
from enum import Enum
from typing import Callable, Optional, Type

from enumtype.core.errors import NotAddableError
from enumtype.core.types import EnumT, Underlying
from enumtype.core.underlying import from_underlying, to_underlying

from .registry import ADDABLE, BIT_SET, declare_trait, is_enum_addable

logger = logging.getLogger("enumtype.traits")


def _composite_name(enum_type: Type[Enum], value: Underlying) -> Optional[str]:
    """Name a combined value after its single-bit members, if it has an exact decomposition."""

    if value <= 0:
        return None
    names: list[str] = []
    remaining = value
    for member in enum_type:
        bit = member.value
        if bit > 0 and bit & (bit - 1) == 0 and remaining & bit:
            names.append(member.name)
            remaining &= ~bit
    if remaining or not names:
        return None
    return "|".join(names)


def _missing_bit_set_value(cls, value):
    """Create and cache a pseudo-member for an integer without a declared member.

    Pseudo-members are never evicted: every distinct value produced by the
    operators (complements included) stays in ``_value2member_map_``, as with
    ``enum.Flag`` before Python 3.11.
    """

    if not isinstance(value, int):
        return None
    if cls._member_type_ is object:
        pseudo_member = object.__new__(cls)
    else:
        pseudo_member = cls._member_type_.__new__(cls, value)
    pseudo_member._value_ = value
    pseudo_member._name_ = _composite_name(cls, value)
    # setdefault keeps a single pseudo-member per value across threads
    return cls._value2member_map_.setdefault(value, pseudo_member)


def _bit_set_member(enum_type, raw: Underlying):
    """Resolve an operator result without going through a user-defined ``_missing_``."""

    try:
        return enum_type._value2member_map_[raw]
    except KeyError:
        return _missing_bit_set_value(enum_type, raw)


def _binary_operator(op: Callable[[int, int], int], symbol: str):
    def apply(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return _bit_set_member(type(self), op(to_underlying(self), to_underlying(other)))

    apply.__name__ = f"__{op.__name__.strip('_')}__"
    apply.__doc__ = f"Return ``self {symbol} other`` as a member of this enum."
    return apply


def _invert(self):
    """Return the complement of ``self`` as a member of this enum."""

    return _bit_set_member(type(self), ~to_underlying(self))


def declare_enum_as_bit_set(enum_type: Type[EnumT]) -> Type[EnumT]:
    """Class decorator enabling bitwise combination of members.

    The enum values must be integers, conventionally powers of two::

        @declare_enum_as_bit_set
        class Access(Enum):
            NONE = 0
            READ = 1
            WRITE = 2

        Access.READ | Access.WRITE  # <Access.READ|WRITE: 3>
    """

    if not declare_trait(enum_type, BIT_SET):
        return enum_type
    enum_type.__or__ = _binary_operator(operator.or_, "|")
    enum_type.__and__ = _binary_operator(operator.and_, "&")
    enum_type.__xor__ = _binary_operator(operator.xor, "^")
    enum_type.__invert__ = _invert
    # a _missing_ written on the enum itself still serves enum_type(raw) lookups;
    # the operators above resolve their results without it
    if "_missing_" not in enum_type.__dict__:
        enum_type._missing_ = classmethod(_missing_bit_set_value)
    logger.debug("Installed bitwise operators", extra={"enum_type": enum_type.__qualname__})
    return enum_type


def enum_add(member: EnumT, offset: Enum) -> EnumT:
    """Return ``member`` shifted by the underlying value of ``offset``.

    ``type(offset)`` must be declared addable. The result has the type of
    ``member``. Use this form when ``member`` is an ``IntEnum`` (whose ``+``
    is plain integer addition) or when both operands share the offset type.
    """

    if not is_enum_addable(type(offset)):
        raise NotAddableError(f"{type(offset).__qualname__} is not declared addable")
    if not isinstance(member, Enum):
        raise TypeError(f"Expected an enum member, got {type(member).__name__}")
    return from_underlying(type(member), to_underlying(member) + to_underlying(offset))


def _radd(self, other):
    if not isinstance(other, Enum):
        return NotImplemented
    return enum_add(other, self)


def declare_enum_as_addable(enum_type: Type[EnumT]) -> Type[EnumT]:
    """Class decorator allowing ``other_member + offset_member``.

    The sum is a member of ``type(other_member)``::

        @declare_enum_as_addable
        class Shift(Enum):
            ONE = 1

        Direction.NORTH + Shift.ONE  # Direction.EAST
    """

    if declare_trait(enum_type, ADDABLE):
        enum_type.__radd__ = _radd
    return enum_type


__all__ = ["declare_enum_as_addable", "declare_enum_as_bit_set", "enum_add"]
