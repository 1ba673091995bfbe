from __future__ import annotations

from enum import Enum, IntEnum

import pytest

from enumtype.core.errors import NotAddableError
from enumtype.traits import (
    declare_enum_as_addable,
    declare_enum_as_bit_set,
    enum_add,
    has_flag,
    is_enum_addable,
    is_enum_bit_set,
    toggle_flag,
)


@declare_enum_as_bit_set
class Access(Enum):
    NONE = 0
    READ = 1
    WRITE = 2
    EXECUTE = 4


@declare_enum_as_bit_set
class Priority(IntEnum):
    LOW = 1
    HIGH = 2


class Plain(Enum):
    X = 1
    Y = 2


class Cell(Enum):
    ORIGIN = 0
    RIGHT = 1
    FAR_RIGHT = 2


class Level(IntEnum):
    GROUND = 0
    FIRST = 1


@declare_enum_as_addable
class Step(Enum):
    ONE = 1
    TWO = 2


def test_is_enum_bit_set_should_reflect_declaration() -> None:
    assert is_enum_bit_set(Access) is True
    assert is_enum_bit_set(Plain) is False


def test_or_should_return_member_of_same_enum() -> None:
    combined = Access.READ | Access.WRITE
    assert isinstance(combined, Access)
    assert combined.value == 3
    assert combined is Access(3)


def test_and_xor_invert_should_follow_integer_semantics() -> None:
    read_write = Access.READ | Access.WRITE
    assert read_write & Access.WRITE is Access.WRITE
    assert read_write ^ Access.READ is Access.WRITE
    assert (~Access.READ).value == ~1
    assert ~~Access.EXECUTE is Access.EXECUTE


def test_in_place_operators_should_rebind_to_enum_members() -> None:
    value = Access.NONE
    value |= Access.READ
    value |= Access.EXECUTE
    assert value.value == 5
    value &= Access.EXECUTE
    assert value is Access.EXECUTE
    value ^= Access.EXECUTE
    assert value is Access.NONE


@pytest.mark.parametrize("member", list(Access))
def test_or_and_should_be_idempotent(member: Access) -> None:
    assert (member | member) is member
    assert (member & member) is member
    assert ~~member is member


def test_pseudo_members_should_be_named_after_their_bits() -> None:
    assert (Access.READ | Access.EXECUTE).name == "READ|EXECUTE"
    assert (~Access.READ).name is None


def test_bitwise_operators_should_reject_other_types() -> None:
    with pytest.raises(TypeError):
        Access.READ | Plain.X  # type: ignore[operator]
    with pytest.raises(TypeError):
        Plain.X | Plain.Y  # type: ignore[operator]


def test_int_enum_bit_set_should_keep_enum_type() -> None:
    combined = Priority.LOW | Priority.HIGH
    assert isinstance(combined, Priority)
    assert combined == 3


def test_addable_enum_should_shift_other_enum() -> None:
    assert is_enum_addable(Step) is True
    assert Cell.ORIGIN + Step.ONE is Cell.RIGHT
    assert Cell.ORIGIN + Step.TWO is Cell.FAR_RIGHT


def test_enum_add_should_work_for_int_enum_operands() -> None:
    assert enum_add(Level.GROUND, Step.ONE) is Level.FIRST


def test_enum_add_should_reject_offsets_not_declared_addable() -> None:
    assert is_enum_addable(Cell) is False
    with pytest.raises(NotAddableError):
        enum_add(Cell.ORIGIN, Cell.RIGHT)
    with pytest.raises(TypeError):
        Cell.ORIGIN + Cell.RIGHT  # type: ignore[operator]


@declare_enum_as_bit_set
class Option(Enum):
    NONE = 0
    A = 1
    B = 2

    @classmethod
    def _missing_(cls, value):
        return cls.NONE


def test_operators_should_ignore_enum_defined_missing_hook() -> None:
    combined = Option.A | Option.B
    assert combined is not Option.NONE
    assert combined.value == 3
    assert (combined & Option.B) is Option.B
    assert (Option.A ^ Option.A) is Option.NONE
    assert (~Option.A).value == ~1


def test_flag_helpers_should_ignore_enum_defined_missing_hook() -> None:
    assert has_flag(Option.A | Option.B, Option.B)
    assert toggle_flag(Option.A, Option.B).value == 3


def test_enum_defined_missing_hook_should_still_serve_direct_lookups() -> None:
    assert Option(42) is Option.NONE
