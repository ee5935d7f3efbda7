from .damage import (
    DamageCalculationInput,
    DamageCalculationResult,
    DamageDistributionTarget,
    DamageWithResistanceResult,
    TargetDamageResult,
    apply_resistance,
    calculate_critical_damage,
    calculate_damage,
    calculate_damage_with_resistance,
    distribute_damage_to_multiple_targets,
)
from .presets import DamagePreset, PresetCatalog, default_catalog, load_presets
from .service import DamageCalculationService
from .statistics import DamageStatistics, get_damage_statistics

__all__ = [
    "DamageCalculationInput",
    "DamageCalculationResult",
    "DamageDistributionTarget",
    "DamageWithResistanceResult",
    "TargetDamageResult",
    "apply_resistance",
    "calculate_critical_damage",
    "calculate_damage",
    "calculate_damage_with_resistance",
    "distribute_damage_to_multiple_targets",
    "DamagePreset",
    "PresetCatalog",
    "default_catalog",
    "load_presets",
    "DamageCalculationService",
    "DamageStatistics",
    "get_damage_statistics",
]
