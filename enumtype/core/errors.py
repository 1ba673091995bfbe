"""Error hierarchy shared by the enumtype subpackages.

Misuse at the type level (calling an operator on an enum that never opted in,
declaring an impossible bit-set layout) is reported with the classes below.
They derive from :class:`TypeError` where Python itself would raise one for
the same mistake, so ``except TypeError`` keeps working for callers.

Value-range misuse (an enumerator wider than the storage, stepping past the
last member) is never reported here.
"""
from __future__ import annotations


class EnumTypeError(Exception):
    """Base class for all custom exceptions in the package."""


class NotIncrementableError(EnumTypeError, TypeError):
    """Raised when incrementing or decrementing an enum that did not opt in."""


class NotBitSetEnumError(EnumTypeError, TypeError):
    """Raised when flag helpers receive values of a non bit-set enum."""


class NotAddableError(EnumTypeError, TypeError):
    """Raised when adding an offset enum that was not declared addable."""


class BitSetLayoutError(EnumTypeError, TypeError):
    """Raised when an EnumBitSet is parameterized with an invalid layout."""


class ConfigurationError(EnumTypeError):
    """Raised when settings files are missing or invalid."""
