"""Validated parameters of an EnumBitSet class.

A bit-set class is described by the enum it wraps, the storage width and the
``end`` bound (one past the last valid enumerator). The combination is checked
once, when the class is created, so a layout that cannot fit its storage never
produces instances.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .storage import Storage


class BitSetLayout(BaseModel):
    """Enum type, storage width and end bound of a bit set.

    ``end`` accepts a member of ``enum_type`` or a plain int and defaults to
    the full storage width.
    """

    enum_type: Type[Enum]
    storage: Storage
    end: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _resolve_end(cls, data: Any) -> Any:
        """Convert an enum ``end`` to its value and default it to the storage width."""

        if not isinstance(data, dict):
            return data
        data = dict(data)
        end = data.get("end")
        if isinstance(end, Enum):
            data["end"] = end.value
        elif end is None and data.get("storage") is not None:
            data["end"] = Storage(data["storage"]).digits
        return data

    @model_validator(mode="after")
    def _check_width(self) -> "BitSetLayout":
        if self.end > self.storage.digits:
            raise ValueError(
                f"end={self.end} does not fit in {self.storage.name} "
                f"({self.storage.digits} bits)"
            )
        return self

    @property
    def mask(self) -> int:
        """Bits 0 to ``end`` (exclusive) set."""

        return self.storage.max >> (self.storage.digits - self.end)


__all__ = ["BitSetLayout"]
