"""Per-type opt-in traits for enumerations.

Every enum type starts with all traits switched off. A concrete enumeration
switches a trait on exactly once, when its class is decorated (see
``increment.py`` and ``bitwise.py``). The generic operators consult these
registries and refuse to work on types that never opted in.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Set, Type

logger = logging.getLogger("enumtype.traits")

INCREMENTABLE = "incrementable"
BIT_SET = "bit_set"
ADDABLE = "addable"

_TRAIT_REGISTRY: Dict[str, Set[Type[Enum]]] = {
    INCREMENTABLE: set(),
    BIT_SET: set(),
    ADDABLE: set(),
}


def declare_trait(enum_type: Type[Enum], trait: str) -> bool:
    """Switch ``trait`` on for ``enum_type``.

    Returns ``True`` when the trait was newly declared and ``False`` when the
    type had already opted in, so decorators can skip repeated setup.
    """

    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"Only Enum subclasses can declare traits, got {enum_type!r}")
    members = _TRAIT_REGISTRY[trait]
    if enum_type in members:
        return False
    if any(not isinstance(member.value, int) for member in enum_type):
        raise TypeError(f"{enum_type.__qualname__} must have integer values to declare {trait}")
    members.add(enum_type)
    logger.debug(
        "Declared enum trait",
        extra={"enum_type": enum_type.__qualname__, "trait": trait},
    )
    return True


def has_trait(enum_type: type, trait: str) -> bool:
    return enum_type in _TRAIT_REGISTRY[trait]


def is_enum_incrementable(enum_type: type) -> bool:
    """Return whether increment/decrement are enabled for ``enum_type``."""

    return has_trait(enum_type, INCREMENTABLE)


def is_enum_bit_set(enum_type: type) -> bool:
    """Return whether bitwise operators are enabled for ``enum_type``."""

    return has_trait(enum_type, BIT_SET)


def is_enum_addable(enum_type: type) -> bool:
    """Return whether ``enum_type`` may be added onto other enumerations."""

    return has_trait(enum_type, ADDABLE)


__all__ = [
    "ADDABLE",
    "BIT_SET",
    "INCREMENTABLE",
    "declare_trait",
    "has_trait",
    "is_enum_addable",
    "is_enum_bit_set",
    "is_enum_incrementable",
]
