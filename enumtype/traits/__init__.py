"""Opt-in traits and operators for enumerations."""

from .bitwise import declare_enum_as_addable, declare_enum_as_bit_set, enum_add
from .flags import has_flag, toggle_flag
from .increment import declare_increment_decrement_operators, decrement, increment
from .ref import EnumRef
from .registry import is_enum_addable, is_enum_bit_set, is_enum_incrementable

__all__ = [
    "EnumRef",
    "declare_enum_as_addable",
    "declare_enum_as_bit_set",
    "declare_increment_decrement_operators",
    "decrement",
    "enum_add",
    "has_flag",
    "increment",
    "is_enum_addable",
    "is_enum_bit_set",
    "is_enum_incrementable",
    "toggle_flag",
]
