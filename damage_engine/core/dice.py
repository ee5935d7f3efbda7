"""
Dice roll engine for the damage engine.

Rolls a number of dice of a given type and reports the individual results
together with their sum. Minimum, maximum and average helpers compute the
same quantities without consuming any randomness.
"""

import random
from typing import Any, Protocol

from catchery import log_critical, log_error
from pydantic import BaseModel, ConfigDict, Field

from damage_engine.core.constants import DICE_VALUES, DiceType
from damage_engine.core.errors import DiceRollError


class RandomSource(Protocol):
    """Anything that can produce a uniform integer in a closed range."""

    def randint(self, a: int, b: int) -> int: ...


class DiceRollResult(BaseModel):
    """Individual dice results and their sum."""

    model_config = ConfigDict(frozen=True)

    rolls: tuple[int, ...] = Field(
        default=(),
        description="List of individual dice rolls",
    )
    total: int = Field(
        default=0,
        description="Sum of the individual dice rolls",
    )


def get_faces(dice_type: DiceType) -> int:
    """
    Returns the number of faces of a die.

    Args:
        dice_type (DiceType): The die to look up.

    Returns:
        int: The face count.

    Raises:
        ValueError: If the die is not in the dice table.

    """
    try:
        return DICE_VALUES[DiceType(dice_type)]
    except (KeyError, ValueError):
        # Unreachable once inputs are validated.
        log_critical(
            f"Unknown dice type reached the roll engine: {dice_type!r}",
            {"dice_type": dice_type},
        )
        raise ValueError(f"Unknown dice type: {dice_type!r}")


def roll_die(dice_type: DiceType, rng: RandomSource | None = None) -> int:
    """
    Rolls a single die.

    Args:
        dice_type (DiceType): The die to roll.
        rng (RandomSource | None): Random source, defaults to the `random` module.

    Returns:
        int: A value in [1, faces].

    """
    faces = get_faces(dice_type)
    source: Any = rng if rng is not None else random
    try:
        value = source.randint(1, faces)
    except Exception as e:
        log_error(
            f"Random source failed while rolling a {dice_type}: {e}",
            {"dice_type": str(dice_type), "error": str(e)},
        )
        raise DiceRollError(str(e), {"dice_type": str(dice_type)}) from e
    if not isinstance(value, int) or not 1 <= value <= faces:
        raise DiceRollError(
            f"random source returned {value!r} for a {dice_type}",
            {"dice_type": str(dice_type), "value": value},
        )
    return value


def roll_dice(
    dice_count: int,
    dice_type: DiceType,
    rng: RandomSource | None = None,
) -> DiceRollResult:
    """
    Rolls several dice of the same type.

    Args:
        dice_count (int): How many dice to roll, zero yields no rolls.
        dice_type (DiceType): The die to roll.
        rng (RandomSource | None): Random source, defaults to the `random` module.

    Returns:
        DiceRollResult: The individual rolls and their sum.

    """
    rolls = tuple(roll_die(dice_type, rng) for _ in range(dice_count))
    return DiceRollResult(rolls=rolls, total=sum(rolls))


def min_roll(dice_count: int, dice_type: DiceType) -> int:
    """Lowest possible sum of the dice, every die showing a one."""
    return dice_count


def max_roll(dice_count: int, dice_type: DiceType) -> int:
    """Highest possible sum of the dice."""
    return dice_count * get_faces(dice_type)


def average_roll(dice_count: int, dice_type: DiceType) -> float:
    """Expected sum of the dice."""
    return dice_count * (1 + get_faces(dice_type)) / 2
