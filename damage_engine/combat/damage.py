"""
Damage module for the damage engine.

Defines the damage data models and the pure calculators built on top of the
dice roll engine: base damage, critical damage, resistance adjustment and
distribution of one roll across several targets.

The calculators assume validated input; the service runs the validation layer
before calling them.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from damage_engine.core.constants import (
    RESISTANCE_MULTIPLIERS,
    DamageType,
    DiceType,
    DistributionMethod,
    ResistanceType,
)
from damage_engine.core.dice import RandomSource, roll_dice


class DamageModel(BaseModel):
    """Immutable base model accepting both snake_case and camelCase fields."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DamageCalculationInput(DamageModel):
    """Dice, modifier and damage type describing one damage roll."""

    dice_count: int = Field(description="Number of dice to roll")
    dice_type: DiceType = Field(description="Type of die to roll (e.g., d6)")
    modifier: int = Field(default=0, description="Flat bonus added to the dice")
    damage_type: DamageType = Field(description="The type of damage (e.g., fire)")


class DamageCalculationResult(DamageModel):
    """The outcome of a damage roll."""

    total_damage: int = Field(description="Dice sum plus modifier, floored at 0")
    dice_rolls: tuple[int, ...] = Field(
        default=(),
        description="Individual dice results, in roll order",
    )
    modifier: int = Field(default=0, description="Flat bonus that was applied")
    damage_type: DamageType = Field(description="The type of damage dealt")
    is_critical: bool = Field(
        default=False,
        description="Whether the dice were doubled for a critical hit",
    )


class DamageWithResistanceResult(DamageCalculationResult):
    """A damage result adjusted for the target's resistance."""

    resistance_type: ResistanceType = Field(description="Resistance applied")
    original_damage: int = Field(description="Total damage before adjustment")
    adjusted_damage: int = Field(description="Total damage after adjustment")


class DamageDistributionTarget(DamageModel):
    """A target receiving a share of a damage roll."""

    id: str = Field(description="Unique identifier of the target")
    name: str = Field(description="Display name of the target")
    resistance_type: ResistanceType = Field(
        description="How the target mitigates the damage",
    )


class TargetDamageResult(DamageModel):
    """The damage one target ends up taking."""

    target_id: str
    target_name: str
    damage_type: DamageType
    resistance_type: ResistanceType
    original_damage: int
    adjusted_damage: int


# ---- Base and critical damage ----
def calculate_damage(
    damage_input: DamageCalculationInput,
    rng: RandomSource | None = None,
) -> DamageCalculationResult:
    """
    Rolls the dice and adds the modifier.

    Args:
        damage_input (DamageCalculationInput):
            The damage specification to roll.
        rng (RandomSource | None):
            Random source, defaults to the `random` module.

    Returns:
        DamageCalculationResult:
            The total, floored at zero, and the individual rolls.

    """
    roll = roll_dice(damage_input.dice_count, damage_input.dice_type, rng)
    return DamageCalculationResult(
        total_damage=max(0, roll.total + damage_input.modifier),
        dice_rolls=roll.rolls,
        modifier=damage_input.modifier,
        damage_type=damage_input.damage_type,
    )


def calculate_critical_damage(
    damage_input: DamageCalculationInput,
    rng: RandomSource | None = None,
) -> DamageCalculationResult:
    """
    Rolls twice the dice of a normal hit; the modifier is added once.

    Args:
        damage_input (DamageCalculationInput):
            The damage specification of the normal hit.
        rng (RandomSource | None):
            Random source, defaults to the `random` module.

    Returns:
        DamageCalculationResult:
            The critical result, flagged with `is_critical`.

    """
    doubled = damage_input.model_copy(
        update={"dice_count": damage_input.dice_count * 2}
    )
    result = calculate_damage(doubled, rng)
    return result.model_copy(update={"is_critical": True})


# ---- Resistance ----
def apply_resistance(damage: int, resistance_type: ResistanceType) -> int:
    """
    Adjusts a damage amount for a resistance classification.

    Args:
        damage (int): The incoming damage.
        resistance_type (ResistanceType): How the target mitigates it.

    Returns:
        int: The adjusted damage, never negative.

    """
    multiplier = RESISTANCE_MULTIPLIERS[ResistanceType(resistance_type)]
    return max(0, int(damage * multiplier))


def calculate_damage_with_resistance(
    base_damage: DamageCalculationResult,
    resistance_type: ResistanceType,
) -> DamageWithResistanceResult:
    """
    Applies a resistance classification to a previously rolled result.

    Args:
        base_damage (DamageCalculationResult): The rolled damage.
        resistance_type (ResistanceType): How the target mitigates it.

    Returns:
        DamageWithResistanceResult: The base result plus the adjusted total.

    """
    return DamageWithResistanceResult(
        total_damage=base_damage.total_damage,
        dice_rolls=base_damage.dice_rolls,
        modifier=base_damage.modifier,
        damage_type=base_damage.damage_type,
        is_critical=base_damage.is_critical,
        resistance_type=resistance_type,
        original_damage=base_damage.total_damage,
        adjusted_damage=apply_resistance(base_damage.total_damage, resistance_type),
    )


# ---- Distribution ----
def _base_shares(
    total_damage: int,
    target_count: int,
    method: DistributionMethod,
) -> list[int]:
    """Returns the pre-resistance damage each target receives."""
    method = DistributionMethod(method)
    if method == DistributionMethod.HALF:
        return [total_damage // 2] * target_count
    if method == DistributionMethod.SPLIT:
        share, remainder = divmod(total_damage, target_count)
        return [share + 1 if i < remainder else share for i in range(target_count)]
    return [total_damage] * target_count


def distribute_damage_to_multiple_targets(
    base_damage: DamageCalculationResult,
    targets: Sequence[DamageDistributionTarget],
    distribution_method: DistributionMethod = DistributionMethod.EQUAL,
) -> list[TargetDamageResult]:
    """
    Applies one damage roll to several targets.

    With the default `equal` method every target takes the full rolled total
    and mitigates it with its own resistance, like an area spell hitting
    everyone for the same roll.

    Args:
        base_damage (DamageCalculationResult):
            The rolled damage.
        targets (Sequence[DamageDistributionTarget]):
            The targets, results keep this order.
        distribution_method (DistributionMethod):
            How the total is assigned before resistance is applied.

    Returns:
        list[TargetDamageResult]:
            One entry per target, in input order.

    """
    shares = _base_shares(base_damage.total_damage, len(targets), distribution_method)
    return [
        TargetDamageResult(
            target_id=target.id,
            target_name=target.name,
            damage_type=base_damage.damage_type,
            resistance_type=target.resistance_type,
            original_damage=share,
            adjusted_damage=apply_resistance(share, target.resistance_type),
        )
        for target, share in zip(targets, shares)
    ]
