"""Type-safe bit sets and opt-in operators for Python enumerations.

The package is organised in layers, leaves first:

* :mod:`enumtype.core` holds the underlying-value accessor every other piece
  converts through, the error hierarchy and shared type aliases.
* :mod:`enumtype.traits` holds the opt-in declarations (incrementable,
  bitwise-combinable, addable) and the ``has_flag``/``toggle_flag`` helpers.
* :mod:`enumtype.bitset` holds :class:`EnumBitSet`, a fixed-width set of enum
  members stored as a single unsigned integer.

``config`` and ``telemetry`` provide settings loading and JSON logging for
applications embedding the package.
"""
from __future__ import annotations

from .bitset import BitSetLayout, EnumBitSet, Storage, enum_bit_set
from .core.errors import (
    BitSetLayoutError,
    ConfigurationError,
    EnumTypeError,
    NotAddableError,
    NotBitSetEnumError,
    NotIncrementableError,
)
from .core.underlying import from_underlying, to_underlying
from .traits import (
    EnumRef,
    declare_enum_as_addable,
    declare_enum_as_bit_set,
    declare_increment_decrement_operators,
    decrement,
    enum_add,
    has_flag,
    increment,
    is_enum_addable,
    is_enum_bit_set,
    is_enum_incrementable,
    toggle_flag,
)

__version__ = "0.1.0"

__all__ = [
    "BitSetLayout",
    "BitSetLayoutError",
    "ConfigurationError",
    "EnumBitSet",
    "EnumRef",
    "EnumTypeError",
    "NotAddableError",
    "NotBitSetEnumError",
    "NotIncrementableError",
    "Storage",
    "declare_enum_as_addable",
    "declare_enum_as_bit_set",
    "declare_increment_decrement_operators",
    "decrement",
    "enum_add",
    "enum_bit_set",
    "from_underlying",
    "has_flag",
    "increment",
    "is_enum_addable",
    "is_enum_bit_set",
    "is_enum_incrementable",
    "to_underlying",
    "toggle_flag",
]
