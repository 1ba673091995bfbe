"""Enum-as-bit-set wrapper.

:class:`EnumBitSet` stores a subset of an enumeration's members in a single
unsigned integer: the member with underlying value ``i`` occupies bit ``i``.
The enum members are therefore bit positions (0, 1, 2, ...), not masks.

A concrete bit set is declared by subclassing with class keywords::

    class Perms(EnumBitSet, enum_type=Perm, storage=Storage.UINT8, end=Perm.END):
        pass

or obtained from :func:`enum_bit_set`, which returns one cached class per
parameter set. Methods are loosely modelled on C++ ``std::bitset``.
"""
from __future__ import annotations

import functools
import logging
from enum import Enum
from typing import ClassVar, Generic, Iterable, Optional, Type, Union

from pydantic import ValidationError

from enumtype.core.errors import BitSetLayoutError
from enumtype.core.types import BitMask, EnumT
from enumtype.core.underlying import to_underlying

from .models import BitSetLayout
from .storage import Storage

logger = logging.getLogger("enumtype.bitset")


@functools.total_ordering
class EnumBitSet(Generic[EnumT]):
    """Bit set over the members of ``ENUM_TYPE`` backed by ``STORAGE``.

    Construction:

    * ``Perms()`` is the empty set.
    * ``Perms(Perm.A)`` holds exactly one member.
    * ``Perms([Perm.A, Perm.C])`` holds every member of the iterable.
    * ``Perms(5)`` / ``Perms.from_base(5)`` restore a raw value, masked with
      ``MASK`` so bits at or above ``END`` are dropped.

    Equality and ordering compare :meth:`base` between bit sets of the same
    layout. Instances are mutable and therefore unhashable.
    """

    LAYOUT: ClassVar[Optional[BitSetLayout]] = None
    ENUM_TYPE: ClassVar[Type[Enum]]
    STORAGE: ClassVar[Storage]
    END: ClassVar[int]
    MASK: ClassVar[int]

    __slots__ = ("_data",)

    def __init_subclass__(
        cls,
        *,
        enum_type: Optional[Type[Enum]] = None,
        storage: Optional[Storage] = None,
        end: Union[Enum, int, None] = None,
        **kwargs,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if enum_type is None and storage is None and end is None:
            # plain subclass of a parameterized bit set keeps its layout
            return
        try:
            layout = BitSetLayout(enum_type=enum_type, storage=storage, end=end)
        except ValidationError as exc:
            raise BitSetLayoutError(f"Invalid layout for {cls.__qualname__}: {exc}") from exc
        cls.LAYOUT = layout
        cls.ENUM_TYPE = layout.enum_type
        cls.STORAGE = layout.storage
        cls.END = layout.end
        cls.MASK = layout.mask
        logger.debug(
            "Declared enum bit set",
            extra={
                "bit_set": cls.__qualname__,
                "enum_type": layout.enum_type.__qualname__,
                "storage": layout.storage.name,
                "end": layout.end,
                "mask": layout.mask,
            },
        )

    def __init__(self, values: Union[EnumT, int, Iterable[EnumT], None] = None) -> None:
        if self.LAYOUT is None:
            raise BitSetLayoutError(
                f"{type(self).__qualname__} has no layout; subclass it with enum_type and storage"
            )
        self._data = 0
        if values is None:
            return
        # enum first: IntEnum members are ints too
        if isinstance(values, Enum):
            self.set(values)
        elif isinstance(values, int):
            self._data = values & self.MASK
        else:
            for value in values:
                self.set(value)

    @classmethod
    def from_base(cls, data: int) -> "EnumBitSet[EnumT]":
        """Restore a bit set from its raw value, masked to the valid bits."""

        if isinstance(data, Enum) or not isinstance(data, int):
            raise TypeError(f"Expected a raw integer, got {type(data).__name__}")
        return cls(data)

    @classmethod
    def from_base_unchecked(cls, data: int) -> "EnumBitSet[EnumT]":
        """Restore a raw value without masking to ``MASK``.

        The value is only cut to the storage width, so bits at or above
        ``END`` survive and :meth:`is_valid` reports them.
        """

        bit_set = cls()
        bit_set._data = cls.STORAGE.truncate(data)
        return bit_set

    def _bit(self, value: EnumT) -> int:
        if not isinstance(value, self.ENUM_TYPE):
            raise TypeError(
                f"{type(self).__qualname__} holds {self.ENUM_TYPE.__qualname__} members, "
                f"got {type(value).__qualname__}"
            )
        return 1 << to_underlying(value)

    def _coerce(self, other: object) -> Optional["EnumBitSet[EnumT]"]:
        """Return ``other`` as a bit set of this layout, or None if it is not one."""

        if isinstance(other, EnumBitSet):
            return other if other.LAYOUT == self.LAYOUT else None
        if isinstance(other, self.ENUM_TYPE):
            return type(self)(other)
        return None

    def _require(self, other: object) -> "EnumBitSet[EnumT]":
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(
                f"Cannot combine {type(self).__qualname__} with {type(other).__qualname__}"
            )
        return coerced

    # Mutation -----------------------------------------------------------
    def set(self, value: EnumT) -> "EnumBitSet[EnumT]":
        """Set the bit of ``value`` and return this bit set."""

        self._data = self.STORAGE.truncate(self._data | self._bit(value))
        return self

    def reset(self, value: EnumT) -> "EnumBitSet[EnumT]":
        """Clear the bit of ``value`` and return this bit set."""

        self._data &= ~self._bit(value)
        return self

    def flip(self, value: EnumT) -> "EnumBitSet[EnumT]":
        """Toggle the bit of ``value`` and return this bit set."""

        if self.test(value):
            return self.reset(value)
        return self.set(value)

    # Queries ------------------------------------------------------------
    def test(self, value: EnumT) -> bool:
        """Return True iff ``value`` is set."""

        return (self._data & self._bit(value)) != 0

    def all(self, other: Union["EnumBitSet[EnumT]", EnumT]) -> bool:
        """Return True iff every member set in ``other`` is also set here."""

        other = self._require(other)
        return (self._data & other._data) == other._data

    def any(self, other: Union["EnumBitSet[EnumT]", EnumT]) -> bool:
        """Return True iff this set and ``other`` share at least one member."""

        other = self._require(other)
        return (self._data & other._data) != 0

    def is_valid(self) -> bool:
        """Return True iff no bit outside ``MASK`` is set.

        Never called by the bit set itself; values restored through
        :meth:`from_base_unchecked` are the ones worth checking.
        """

        return (self._data & self.MASK) == self._data

    def base(self) -> BitMask:
        """Return the raw value behind this bit set."""

        return BitMask(self._data)

    def copy(self) -> "EnumBitSet[EnumT]":
        duplicate = type(self)()
        duplicate._data = self._data
        return duplicate

    # Operators ----------------------------------------------------------
    def __or__(self, other: object) -> "EnumBitSet[EnumT]":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return type(self)(self._data | coerced._data)

    __ror__ = __or__

    def __and__(self, other: object) -> "EnumBitSet[EnumT]":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return type(self)(self._data & coerced._data)

    __rand__ = __and__

    def __contains__(self, value: object) -> bool:
        return isinstance(value, self.ENUM_TYPE) and self.test(value)

    def __eq__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._data == coerced._data

    def __lt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._data < coerced._data

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return self._data != 0

    def __int__(self) -> int:
        return self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data:#b})"


def enum_bit_set(
    enum_type: Type[EnumT],
    storage: Storage,
    end: Union[EnumT, int, None] = None,
) -> Type[EnumBitSet[EnumT]]:
    """Return the bit-set class for ``enum_type``, creating it on first use.

    Calls describing the same layout return the same class: ``end`` given as
    a member, as its int value, or omitted for the full storage width are
    interchangeable.
    """

    if isinstance(end, Enum):
        end = end.value
    if end is None and isinstance(storage, Storage):
        end = storage.digits
    return _cached_enum_bit_set(enum_type, storage, end)


@functools.lru_cache(maxsize=None)
def _cached_enum_bit_set(enum_type, storage, end):
    name = f"{enum_type.__name__}BitSet"
    namespace = {"__module__": enum_type.__module__, "__qualname__": name}
    return type(name, (EnumBitSet,), namespace, enum_type=enum_type, storage=storage, end=end)


__all__ = ["EnumBitSet", "enum_bit_set"]
