"""
Core system module for the damage engine.

This module contains the fundamental components the calculators are built on,
including constants, configuration, the error taxonomy, logging and the dice
roll engine.
"""

from .config import (
    DAMAGE_CALCULATION_LIMITS,
    DamageCalculationLimits,
)
from .constants import (
    DAMAGE_TYPE_CATEGORIES,
    DICE_VALUES,
    RESISTANCE_MULTIPLIERS,
    DamageType,
    DiceType,
    DistributionMethod,
    ResistanceType,
)
from .dice import (
    DiceRollResult,
    average_roll,
    max_roll,
    min_roll,
    roll_dice,
    roll_die,
)
from .errors import (
    DamageCalculationLimitError,
    DamageCalculationServiceError,
    DiceRollError,
    ErrorKind,
    InvalidDamageInputError,
    PresetNotFoundError,
)
from .logging import get_logger, setup_logging

__all__ = [
    # Import from config.py
    "DAMAGE_CALCULATION_LIMITS",
    "DamageCalculationLimits",
    # Import from constants.py
    "DAMAGE_TYPE_CATEGORIES",
    "DICE_VALUES",
    "RESISTANCE_MULTIPLIERS",
    "DamageType",
    "DiceType",
    "DistributionMethod",
    "ResistanceType",
    # Import from dice.py
    "DiceRollResult",
    "average_roll",
    "max_roll",
    "min_roll",
    "roll_dice",
    "roll_die",
    # Import from errors.py
    "DamageCalculationLimitError",
    "DamageCalculationServiceError",
    "DiceRollError",
    "ErrorKind",
    "InvalidDamageInputError",
    "PresetNotFoundError",
    # Import from logging.py
    "get_logger",
    "setup_logging",
]
