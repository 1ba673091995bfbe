"""Unsigned storage widths available to :class:`EnumBitSet`."""
from __future__ import annotations

from enum import Enum


class Storage(Enum):
    """Fixed-width unsigned integer backing a bit set, keyed by bit width."""

    UINT8 = 8
    UINT16 = 16
    UINT32 = 32
    UINT64 = 64

    @property
    def digits(self) -> int:
        """Number of value bits in this storage type."""

        return self.value

    @property
    def max(self) -> int:
        """Largest representable value (all bits set)."""

        return (1 << self.value) - 1

    def truncate(self, raw: int) -> int:
        """Cast ``raw`` to this width, dropping any higher bits."""

        return raw & self.max


__all__ = ["Storage"]
