"""Mutable holder for an enum value.

Enum members are immutable singletons, so the in-place operators of the
traits (prefix/postfix stepping, flag toggling) need a cell to update.
"""
from __future__ import annotations

from typing import Generic

from enumtype.core.types import EnumT

from .flags import toggle_flag
from .increment import decrement, increment


class EnumRef(Generic[EnumT]):
    """Cell holding one enum value, updated in place by its methods.

    Prefix methods return the updated value, postfix methods return the value
    held before the update::

        ref = EnumRef(Direction.NORTH)
        ref.post_increment()  # Direction.NORTH
        ref.value             # Direction.EAST
    """

    __slots__ = ("value",)

    def __init__(self, value: EnumT) -> None:
        self.value = value

    def pre_increment(self) -> EnumT:
        self.value = increment(self.value)
        return self.value

    def post_increment(self) -> EnumT:
        prior = self.value
        self.pre_increment()
        return prior

    def pre_decrement(self) -> EnumT:
        self.value = decrement(self.value)
        return self.value

    def post_decrement(self) -> EnumT:
        prior = self.value
        self.pre_decrement()
        return prior

    def toggle_flag(self, flag: EnumT) -> EnumT:
        """Toggle ``flag`` on the held value and return the new value."""

        self.value = toggle_flag(self.value, flag)
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EnumRef):
            return self.value == other.value
        return self.value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


__all__ = ["EnumRef"]
