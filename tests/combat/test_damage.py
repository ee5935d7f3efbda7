"""
Tests for the damage calculators.
"""

import pytest
from damage_engine.combat.damage import (
    DamageCalculationInput,
    DamageCalculationResult,
    DamageDistributionTarget,
    apply_resistance,
    calculate_critical_damage,
    calculate_damage,
    calculate_damage_with_resistance,
    distribute_damage_to_multiple_targets,
)
from damage_engine.core.constants import (
    RESISTANCE_MULTIPLIERS,
    DamageType,
    DiceType,
    DistributionMethod,
    ResistanceType,
)
from pydantic import ValidationError


@pytest.fixture
def fire_damage():
    return DamageCalculationResult(
        total_damage=20,
        dice_rolls=(6, 6, 8),
        modifier=0,
        damage_type=DamageType.FIRE,
    )


@pytest.fixture
def mixed_targets():
    return [
        DamageDistributionTarget(
            id="1", name="Fire Elemental", resistance_type=ResistanceType.IMMUNE
        ),
        DamageDistributionTarget(
            id="2", name="Ice Troll", resistance_type=ResistanceType.VULNERABLE
        ),
        DamageDistributionTarget(
            id="3", name="Stone Golem", resistance_type=ResistanceType.RESISTANT
        ),
        DamageDistributionTarget(
            id="4", name="Goblin", resistance_type=ResistanceType.NORMAL
        ),
    ]


def test_input_accepts_camel_case_fields():
    damage_input = DamageCalculationInput(
        diceCount=2, diceType="d6", modifier=3, damageType="fire"
    )
    assert damage_input.dice_count == 2
    assert damage_input.dice_type is DiceType.D6
    assert damage_input.damage_type is DamageType.FIRE
    assert damage_input.model_dump(by_alias=True)["diceCount"] == 2


def test_results_are_immutable(fire_damage):
    with pytest.raises(ValidationError):
        fire_damage.total_damage = 0


def test_calculate_damage_adds_modifier(mocker):
    mocker.patch("random.randint", side_effect=[4, 5])
    result = calculate_damage(
        DamageCalculationInput(
            dice_count=2,
            dice_type=DiceType.D6,
            modifier=3,
            damage_type=DamageType.SLASHING,
        )
    )
    assert result.total_damage == 12
    assert result.dice_rolls == (4, 5)
    assert result.modifier == 3
    assert result.damage_type is DamageType.SLASHING
    assert not result.is_critical


def test_calculate_damage_floors_at_zero(mocker):
    mocker.patch("random.randint", return_value=1)
    result = calculate_damage(
        DamageCalculationInput(
            dice_count=1,
            dice_type=DiceType.D4,
            modifier=-5,
            damage_type=DamageType.BLUDGEONING,
        )
    )
    assert result.total_damage == 0
    assert result.dice_rolls == (1,)
    assert result.modifier == -5


def test_critical_doubles_dice_not_modifier(mocker):
    mocker.patch("random.randint", side_effect=[5, 6, 3, 8])
    result = calculate_critical_damage(
        DamageCalculationInput(
            dice_count=2,
            dice_type=DiceType.D8,
            modifier=4,
            damage_type=DamageType.SLASHING,
        )
    )
    assert result.total_damage == 26
    assert result.dice_rolls == (5, 6, 3, 8)
    assert result.modifier == 4
    assert result.is_critical


def test_critical_with_zero_dice_keeps_modifier(mocker):
    randint = mocker.patch("random.randint")
    result = calculate_critical_damage(
        DamageCalculationInput(
            dice_count=0,
            dice_type=DiceType.D6,
            modifier=3,
            damage_type=DamageType.FORCE,
        )
    )
    assert result.total_damage == 3
    assert result.dice_rolls == ()
    randint.assert_not_called()


@pytest.mark.parametrize(
    "damage, resistance_type, expected",
    [
        (10, ResistanceType.NORMAL, 10),
        (10, ResistanceType.RESISTANT, 5),
        (15, ResistanceType.RESISTANT, 7),
        (1, ResistanceType.RESISTANT, 0),
        (10, ResistanceType.VULNERABLE, 20),
        (10, ResistanceType.IMMUNE, 0),
        (0, ResistanceType.VULNERABLE, 0),
    ],
)
def test_apply_resistance(damage, resistance_type, expected):
    assert apply_resistance(damage, resistance_type) == expected


@pytest.mark.parametrize("resistance_type", list(ResistanceType))
def test_apply_resistance_follows_multiplier_table(resistance_type):
    multiplier = RESISTANCE_MULTIPLIERS[resistance_type]
    for damage in range(0, 41):
        assert apply_resistance(damage, resistance_type) == int(damage * multiplier)
    assert apply_resistance(7, resistance_type.value) == int(7 * multiplier)


def test_calculate_damage_with_resistance_keeps_base_fields(fire_damage):
    result = calculate_damage_with_resistance(fire_damage, ResistanceType.RESISTANT)
    assert result.adjusted_damage == 10
    assert result.original_damage == 20
    assert result.total_damage == 20
    assert result.resistance_type is ResistanceType.RESISTANT
    assert result.dice_rolls == fire_damage.dice_rolls
    assert result.damage_type is DamageType.FIRE


def test_calculate_damage_with_resistance_is_repeatable(fire_damage):
    first = calculate_damage_with_resistance(fire_damage, ResistanceType.VULNERABLE)
    second = calculate_damage_with_resistance(fire_damage, ResistanceType.VULNERABLE)
    assert first == second


def test_equal_distribution_applies_each_resistance(fire_damage, mixed_targets):
    results = distribute_damage_to_multiple_targets(fire_damage, mixed_targets)
    assert [r.target_id for r in results] == ["1", "2", "3", "4"]
    assert [r.target_name for r in results] == [
        "Fire Elemental",
        "Ice Troll",
        "Stone Golem",
        "Goblin",
    ]
    assert [r.adjusted_damage for r in results] == [0, 40, 10, 20]
    assert all(r.original_damage == 20 for r in results)


def test_half_distribution(fire_damage, mixed_targets):
    results = distribute_damage_to_multiple_targets(
        fire_damage, mixed_targets, DistributionMethod.HALF
    )
    assert [r.original_damage for r in results] == [10, 10, 10, 10]
    assert [r.adjusted_damage for r in results] == [0, 20, 5, 10]


def test_split_distribution_keeps_the_pool():
    base = DamageCalculationResult(
        total_damage=10, dice_rolls=(4, 6), damage_type=DamageType.THUNDER
    )
    targets = [
        DamageDistributionTarget(id=str(i), name="Kobold", resistance_type="normal")
        for i in range(3)
    ]
    results = distribute_damage_to_multiple_targets(
        base, targets, DistributionMethod.SPLIT
    )
    assert [r.adjusted_damage for r in results] == [4, 3, 3]
    assert sum(r.adjusted_damage for r in results) == 10


def test_split_distribution_with_more_targets_than_damage():
    base = DamageCalculationResult(
        total_damage=1, dice_rolls=(1,), damage_type=DamageType.ACID
    )
    targets = [
        DamageDistributionTarget(id=str(i), name=f"Rat {i}", resistance_type="normal")
        for i in range(3)
    ]
    results = distribute_damage_to_multiple_targets(base, targets, "split")
    assert [r.adjusted_damage for r in results] == [1, 0, 0]
