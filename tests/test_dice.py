"""
Tests for dice and random sources.
"""

import random

import pytest

from knockout import Dice, InvalidConfigurationError, OneThroughTen
from conftest import SequenceSource


def test_roll_uses_modulo_formula():
    """A source fixed at 5 gives 5 % 6 + 1 = 6 on a six-sided die."""
    dice = Dice(6, SequenceSource([5]))

    assert [dice.roll() for _ in range(5)] == [6, 6, 6, 6, 6]


def test_roll_wraps_values_above_side_count():
    dice = Dice(6, SequenceSource([0, 6, 7, 10]))

    assert [dice.roll() for _ in range(4)] == [1, 1, 2, 5]


def test_roll_stays_in_range_with_real_generator():
    dice = Dice(6, OneThroughTen(random.Random(3)))

    faces = {dice.roll() for _ in range(500)}
    assert faces <= set(range(1, 7))


def test_modulo_bias_over_one_through_ten():
    """Source values 1-10 on six sides: faces 2-5 come up twice, faces 1 and 6 once."""
    dice = Dice(6, SequenceSource(list(range(1, 11))))

    faces = [dice.roll() for _ in range(10)]
    counts = {face: faces.count(face) for face in range(1, 7)}
    assert counts == {1: 1, 2: 2, 3: 2, 4: 2, 5: 2, 6: 1}


def test_one_through_ten_range():
    source = OneThroughTen(random.Random(11))

    values = {source.random() for _ in range(1000)}
    assert values == set(range(1, 11))


def test_one_through_ten_is_reproducible_with_seed():
    a = OneThroughTen(random.Random(5))
    b = OneThroughTen(random.Random(5))

    assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]


@pytest.mark.parametrize("sides", [0, -1])
def test_non_positive_sides_rejected(sides):
    with pytest.raises(InvalidConfigurationError):
        Dice(sides, SequenceSource([1]))
