"""Flag queries on enum members combined with bitwise OR.

Both helpers work directly on members of an enum declared with
:func:`enumtype.traits.bitwise.declare_enum_as_bit_set`; no bit-set wrapper
is involved.
"""
from __future__ import annotations

from enum import Enum

from enumtype.core.errors import NotBitSetEnumError
from enumtype.core.types import EnumT

from .registry import is_enum_bit_set


def _require_bit_set(x: Enum, y: Enum) -> None:
    enum_type = type(x)
    if not is_enum_bit_set(enum_type):
        raise NotBitSetEnumError(f"{enum_type.__qualname__} is not declared as a bit set")
    if type(y) is not enum_type:
        raise NotBitSetEnumError(
            f"Cannot combine {enum_type.__qualname__} with {type(y).__qualname__}"
        )


def has_flag(x: EnumT, y: EnumT) -> bool:
    """Return True iff every bit set in ``y`` is also set in ``x``.

    A multi-bit ``y`` tests that all of its flags are present.
    """

    _require_bit_set(x, y)
    return (x & y) == y


def toggle_flag(x: EnumT, y: EnumT) -> EnumT:
    """Return ``x`` with the flags of ``y`` toggled as a group.

    If all bits of ``y`` are present they are cleared, otherwise all of them
    are set. A ``y`` that is only partly present in ``x`` is therefore set in
    full rather than XOR-ed bit by bit. Enum members are immutable, so the
    caller rebinds the result (``x = toggle_flag(x, y)``).
    """

    if has_flag(x, y):
        x &= ~y
    else:
        x |= y
    return x


__all__ = ["has_flag", "toggle_flag"]
