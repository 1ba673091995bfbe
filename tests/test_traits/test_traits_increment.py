from __future__ import annotations

from enum import Enum

import pytest

from enumtype.core.errors import NotIncrementableError
from enumtype.traits import (
    declare_enum_as_bit_set,
    declare_increment_decrement_operators,
    decrement,
    increment,
    is_enum_incrementable,
)


@declare_increment_decrement_operators
class Direction(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class Season(Enum):
    SPRING = 0
    SUMMER = 1


@declare_increment_decrement_operators
@declare_enum_as_bit_set
class Slot(Enum):
    FIRST = 0
    LAST = 7


def test_is_enum_incrementable_should_default_to_false() -> None:
    assert is_enum_incrementable(Season) is False
    assert is_enum_incrementable(int) is False


def test_declare_increment_decrement_operators_should_enable_trait() -> None:
    assert is_enum_incrementable(Direction) is True


def test_declare_increment_decrement_operators_should_be_idempotent() -> None:
    assert declare_increment_decrement_operators(Direction) is Direction
    assert is_enum_incrementable(Direction) is True


def test_increment_should_step_to_next_member() -> None:
    assert increment(Direction.NORTH) is Direction.EAST
    assert increment(Direction.SOUTH) is Direction.WEST


def test_decrement_should_step_to_previous_member() -> None:
    assert decrement(Direction.WEST) is Direction.SOUTH
    assert decrement(increment(Direction.EAST)) is Direction.EAST


def test_increment_should_reject_types_that_did_not_opt_in() -> None:
    with pytest.raises(NotIncrementableError):
        increment(Season.SPRING)
    with pytest.raises(TypeError):
        decrement(Season.SUMMER)


def test_increment_past_last_member_should_propagate_enum_error() -> None:
    with pytest.raises(ValueError):
        increment(Direction.WEST)


def test_increment_on_bit_set_enum_should_yield_pseudo_member() -> None:
    stepped = increment(Slot.FIRST)
    assert isinstance(stepped, Slot)
    assert stepped.value == 1
    assert decrement(stepped) is Slot.FIRST


def test_declare_trait_should_reject_non_integer_values() -> None:
    class Named(Enum):
        ONE = "one"

    with pytest.raises(TypeError):
        declare_increment_decrement_operators(Named)
    assert is_enum_incrementable(Named) is False
