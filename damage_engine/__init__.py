"""
Damage calculation engine for tabletop RPG encounters.

Turns a damage specification (dice count, die type, modifier, damage type)
into a concrete damage result, optionally adjusted for resistance, doubled
for critical hits, or distributed across several targets.
"""

from .combat import (
    DamageCalculationInput,
    DamageCalculationResult,
    DamageCalculationService,
    DamageDistributionTarget,
    DamagePreset,
    DamageStatistics,
    DamageWithResistanceResult,
    TargetDamageResult,
)
from .core import (
    DAMAGE_CALCULATION_LIMITS,
    DamageCalculationLimitError,
    DamageCalculationLimits,
    DamageCalculationServiceError,
    DamageType,
    DiceRollError,
    DiceType,
    DistributionMethod,
    ErrorKind,
    InvalidDamageInputError,
    PresetNotFoundError,
    ResistanceType,
)

__all__ = [
    "DamageCalculationInput",
    "DamageCalculationResult",
    "DamageCalculationService",
    "DamageDistributionTarget",
    "DamagePreset",
    "DamageStatistics",
    "DamageWithResistanceResult",
    "TargetDamageResult",
    "DAMAGE_CALCULATION_LIMITS",
    "DamageCalculationLimitError",
    "DamageCalculationLimits",
    "DamageCalculationServiceError",
    "DamageType",
    "DiceRollError",
    "DiceType",
    "DistributionMethod",
    "ErrorKind",
    "InvalidDamageInputError",
    "PresetNotFoundError",
    "ResistanceType",
]
