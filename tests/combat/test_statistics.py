"""
Tests for damage statistics.
"""

import pytest
from damage_engine.combat.damage import DamageCalculationInput
from damage_engine.combat.statistics import get_damage_statistics
from damage_engine.core.constants import DamageType, DiceType


def make_input(dice_count, dice_type, modifier):
    return DamageCalculationInput(
        dice_count=dice_count,
        dice_type=dice_type,
        modifier=modifier,
        damage_type=DamageType.FIRE,
    )


def test_two_d6_plus_three():
    stats = get_damage_statistics(make_input(2, DiceType.D6, 3))
    assert stats.minimum == 5
    assert stats.maximum == 15
    assert stats.average == 10
    assert stats.expected_damage == 10


def test_zero_dice_collapses_to_modifier():
    stats = get_damage_statistics(make_input(0, DiceType.D6, 5))
    assert (stats.minimum, stats.maximum, stats.average) == (5, 5, 5)


def test_negative_modifier_floors_at_zero():
    stats = get_damage_statistics(make_input(1, DiceType.D4, -10))
    assert (stats.minimum, stats.maximum, stats.average) == (0, 0, 0)
    assert stats.expected_damage == 0


def test_average_can_be_fractional():
    assert get_damage_statistics(make_input(1, DiceType.D6, 0)).average == 3.5


@pytest.mark.parametrize("dice_type", list(DiceType))
@pytest.mark.parametrize("dice_count, modifier", [(0, 0), (1, -3), (4, 2), (100, -999)])
def test_minimum_average_maximum_ordering(dice_type, dice_count, modifier):
    stats = get_damage_statistics(make_input(dice_count, dice_type, modifier))
    assert 0 <= stats.minimum <= stats.average <= stats.maximum
    assert stats.expected_damage == stats.average
