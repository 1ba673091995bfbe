"""Bit sets over enumeration members."""

from .enum_bit_set import EnumBitSet, enum_bit_set
from .models import BitSetLayout
from .storage import Storage

__all__ = ["BitSetLayout", "EnumBitSet", "Storage", "enum_bit_set"]
