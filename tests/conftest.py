from __future__ import annotations

from enum import Enum

import pytest

from enumtype.bitset import EnumBitSet, Storage


class Letter(Enum):
    A = 0
    B = 1
    C = 2
    END = 3


class LetterSet(EnumBitSet, enum_type=Letter, storage=Storage.UINT8, end=Letter.END):
    pass


@pytest.fixture(scope="session")
def letter() -> type[Letter]:
    return Letter


@pytest.fixture(scope="session")
def letter_set() -> type[LetterSet]:
    return LetterSet


@pytest.fixture
def letter_set_factory(letter_set):
    def _factory(*values: Letter) -> LetterSet:
        return letter_set(list(values))

    return _factory
