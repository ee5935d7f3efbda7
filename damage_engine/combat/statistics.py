"""
Damage statistics computed from a damage specification without rolling.
"""

from pydantic import Field

from damage_engine.combat.damage import DamageCalculationInput, DamageModel
from damage_engine.core.dice import average_roll, max_roll, min_roll


class DamageStatistics(DamageModel):
    """Minimum, maximum and expected damage of a damage specification."""

    minimum: int = Field(description="Lowest possible total")
    maximum: int = Field(description="Highest possible total")
    average: float = Field(description="Expected total")
    expected_damage: float = Field(description="Same as average")


def get_damage_statistics(damage_input: DamageCalculationInput) -> DamageStatistics:
    """
    Computes the damage range and expected value of a damage specification.

    Each figure is floored at zero, like rolled damage. With no dice all three
    collapse to max(0, modifier).

    Args:
        damage_input (DamageCalculationInput): The damage specification.

    Returns:
        DamageStatistics: The computed figures.

    """
    count, dice, modifier = (
        damage_input.dice_count,
        damage_input.dice_type,
        damage_input.modifier,
    )
    average = max(0, average_roll(count, dice) + modifier)
    return DamageStatistics(
        minimum=max(0, min_roll(count, dice) + modifier),
        maximum=max(0, max_roll(count, dice) + modifier),
        average=average,
        expected_damage=average,
    )
