"""
Damage calculation service.

Façade over the damage engine: validates every input, runs the calculators and
reports failures through the typed error taxonomy. The service holds no
mutable state after construction, so one instance can be shared freely.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from damage_engine.combat.damage import (
    DamageCalculationResult,
    DamageWithResistanceResult,
    TargetDamageResult,
    calculate_critical_damage,
    calculate_damage,
    calculate_damage_with_resistance,
    distribute_damage_to_multiple_targets,
)
from damage_engine.combat.presets import DamagePreset, PresetCatalog, default_catalog
from damage_engine.combat.statistics import DamageStatistics, get_damage_statistics
from damage_engine.combat.validation import (
    validate_base_damage,
    validate_damage_input,
    validate_distribution_method,
    validate_resistance_type,
    validate_targets,
)
from damage_engine.core.config import DAMAGE_CALCULATION_LIMITS, DamageCalculationLimits
from damage_engine.core.constants import DistributionMethod, ResistanceType
from damage_engine.core.dice import RandomSource
from damage_engine.core.errors import (
    DamageCalculationServiceError,
    PresetNotFoundError,
)
from damage_engine.core.logging import format_context, get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class DamageCalculationService:
    """Validated access to damage rolls, resistances, presets and statistics."""

    def __init__(
        self,
        limits: DamageCalculationLimits = DAMAGE_CALCULATION_LIMITS,
        rng: RandomSource | None = None,
        presets: PresetCatalog | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            limits (DamageCalculationLimits):
                Bounds enforced before every calculation.
            rng (RandomSource | None):
                Random source for dice rolls, defaults to the `random` module.
            presets (PresetCatalog | None):
                Preset catalog, defaults to the packaged presets.

        """
        self.limits = limits
        self._rng = rng
        self._presets = presets if presets is not None else default_catalog()

    def _run(self, operation: str, func: Callable[[], T], context: dict[str, Any]) -> T:
        """Runs a calculation, wrapping unexpected failures in a service error."""
        logger.debug(format_context(f"Running {operation}", context))
        try:
            return func()
        except DamageCalculationServiceError as e:
            logger.debug(format_context(f"{operation} failed: {e}", {"code": e.code}))
            raise
        except Exception as e:
            raise DamageCalculationServiceError(f"Failed to {operation}: {e}") from e

    # ---- Rolling ----
    def calculate_damage(self, damage_input: Any) -> DamageCalculationResult:
        """
        Rolls damage for a validated damage specification.

        Args:
            damage_input (Any):
                A DamageCalculationInput or an equivalent mapping.

        Returns:
            DamageCalculationResult: The rolled damage.

        """

        def _calculate() -> DamageCalculationResult:
            validated = validate_damage_input(damage_input, self.limits)
            return calculate_damage(validated, self._rng)

        return self._run("calculate damage", _calculate, {"input": damage_input})

    def calculate_critical_damage(self, damage_input: Any) -> DamageCalculationResult:
        """Rolls critical damage: twice the dice, the modifier once."""

        def _calculate() -> DamageCalculationResult:
            validated = validate_damage_input(damage_input, self.limits)
            return calculate_critical_damage(validated, self._rng)

        return self._run(
            "calculate critical damage", _calculate, {"input": damage_input}
        )

    # ---- Resistance and distribution ----
    def calculate_damage_with_resistance(
        self,
        base_damage: Any,
        resistance_type: ResistanceType | str,
    ) -> DamageWithResistanceResult:
        """
        Applies a resistance classification to a rolled result.

        Args:
            base_damage (Any):
                A DamageCalculationResult or an equivalent mapping.
            resistance_type (ResistanceType | str):
                normal, resistant, vulnerable or immune.

        Returns:
            DamageWithResistanceResult: The base result plus the adjusted total.

        """

        def _calculate() -> DamageWithResistanceResult:
            validated = validate_base_damage(base_damage)
            resistance = validate_resistance_type(resistance_type)
            return calculate_damage_with_resistance(validated, resistance)

        return self._run(
            "apply resistance",
            _calculate,
            {"resistance_type": resistance_type},
        )

    def distribute_damage_to_targets(
        self,
        base_damage: Any,
        targets: Any,
        distribution_method: DistributionMethod | str = DistributionMethod.EQUAL,
    ) -> list[TargetDamageResult]:
        """
        Applies one rolled result to several targets.

        Args:
            base_damage (Any):
                A DamageCalculationResult or an equivalent mapping.
            targets (Any):
                A list of DamageDistributionTarget models or mappings.
            distribution_method (DistributionMethod | str):
                equal (default), half or split.

        Returns:
            list[TargetDamageResult]: One entry per target, in input order.

        """

        def _distribute() -> list[TargetDamageResult]:
            validated = validate_base_damage(base_damage)
            validated_targets = validate_targets(targets, self.limits)
            method = validate_distribution_method(distribution_method)
            return distribute_damage_to_multiple_targets(
                validated, validated_targets, method
            )

        return self._run(
            "distribute damage",
            _distribute,
            {"method": distribution_method},
        )

    # ---- Presets ----
    def get_preset_by_name(self, name: str) -> DamagePreset | None:
        """Returns the preset with the given id or display name, if any."""
        if not isinstance(name, str):
            return None
        return self._presets.get(name)

    def get_all_presets(self) -> list[DamagePreset]:
        """Returns a new list holding every preset."""
        return self._presets.all()

    def get_presets_by_tag(self, tag: str) -> list[DamagePreset]:
        """Returns a new list holding the presets carrying the tag."""
        return self._presets.by_tag(tag)

    def calculate_damage_from_preset(
        self,
        preset_name: str,
        modifier_override: int | None = None,
    ) -> DamageCalculationResult:
        """
        Rolls the damage of a preset.

        Args:
            preset_name (str):
                The preset id or display name.
            modifier_override (int | None):
                Replaces the preset modifier when provided.

        Returns:
            DamageCalculationResult: The rolled damage.

        Raises:
            PresetNotFoundError: If the preset does not exist.

        """
        preset = self.get_preset_by_name(preset_name)
        if preset is None:
            logger.debug(format_context("Preset not found", {"name": preset_name}))
            raise PresetNotFoundError(str(preset_name))
        damage_input = preset.to_input()
        if modifier_override is not None:
            damage_input = {
                **damage_input.model_dump(),
                "modifier": modifier_override,
            }
        return self.calculate_damage(damage_input)

    # ---- Statistics ----
    def get_damage_statistics(self, damage_input: Any) -> DamageStatistics:
        """
        Computes minimum, maximum and expected damage without rolling.

        Args:
            damage_input (Any):
                A DamageCalculationInput or an equivalent mapping.

        Returns:
            DamageStatistics: The computed figures.

        """

        def _calculate() -> DamageStatistics:
            return get_damage_statistics(validate_damage_input(damage_input, self.limits))

        return self._run(
            "calculate damage statistics", _calculate, {"input": damage_input}
        )

