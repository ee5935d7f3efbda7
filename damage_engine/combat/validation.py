"""
Input validation for the damage engine.

Every check is fail-fast: the first violation raises one of the typed errors
from `damage_engine.core.errors` before any dice are rolled. Inputs may be
given as models or as plain mappings using either snake_case or camelCase
keys; validated values are always returned as models.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from damage_engine.combat.damage import (
    DamageCalculationInput,
    DamageCalculationResult,
    DamageDistributionTarget,
)
from damage_engine.core.config import DAMAGE_CALCULATION_LIMITS, DamageCalculationLimits
from damage_engine.core.constants import (
    DamageType,
    DiceType,
    DistributionMethod,
    ResistanceType,
)
from damage_engine.core.errors import (
    DamageCalculationLimitError,
    InvalidDamageInputError,
)

_MISSING = object()


def _get_field(value: Any, name: str) -> Any:
    """Reads a field from a model or mapping, accepting the camelCase alias."""
    if isinstance(value, Mapping):
        if name in value:
            return value[name]
        return value.get(to_camel(name), _MISSING)
    return getattr(value, name, _MISSING)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_enum(value: Any, enum_class: type, field: str, constraint: str) -> Any:
    if value is _MISSING or value is None:
        raise InvalidDamageInputError(field, None, f"{field} is required")
    try:
        return enum_class(value)
    except ValueError:
        raise InvalidDamageInputError(field, value, constraint) from None


def _build(model_class: type, data: dict[str, Any], prefix: str = "") -> Any:
    """Constructs a model, reporting pydantic failures as invalid input."""
    try:
        return model_class(**data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ())) or "input"
        raise InvalidDamageInputError(
            f"{prefix}{field}", error.get("input"), error.get("msg", str(e))
        ) from e


def validate_damage_input(
    damage_input: Any,
    limits: DamageCalculationLimits = DAMAGE_CALCULATION_LIMITS,
) -> DamageCalculationInput:
    """
    Validates a damage specification against the configured limits.

    Args:
        damage_input (Any):
            A DamageCalculationInput or an equivalent mapping.
        limits (DamageCalculationLimits):
            The bounds to enforce.

    Returns:
        DamageCalculationInput: The validated input.

    Raises:
        InvalidDamageInputError: If a field is missing, mistyped or negative.
        DamageCalculationLimitError: If a field is outside the configured bounds.

    """
    if damage_input is None:
        raise InvalidDamageInputError("input", None, "Cannot be None")

    dice_count = _get_field(damage_input, "dice_count")
    if not _is_int(dice_count):
        raise InvalidDamageInputError(
            "dice_count",
            None if dice_count is _MISSING else dice_count,
            "Must be an integer",
        )
    if dice_count < 0:
        raise InvalidDamageInputError("dice_count", dice_count, "Must be non-negative")
    if dice_count > limits.max_dice_count:
        raise DamageCalculationLimitError(
            "Dice count", dice_count, limits.max_dice_count
        )

    modifier = _get_field(damage_input, "modifier")
    if modifier is _MISSING:
        modifier = 0
    if not _is_int(modifier):
        raise InvalidDamageInputError("modifier", modifier, "Must be an integer")
    if modifier < limits.min_modifier:
        raise DamageCalculationLimitError("Modifier", modifier, limits.min_modifier)
    if modifier > limits.max_modifier:
        raise DamageCalculationLimitError("Modifier", modifier, limits.max_modifier)

    dice_type = _require_enum(
        _get_field(damage_input, "dice_type"),
        DiceType,
        "dice_type",
        "Must be a valid dice type",
    )
    damage_type = _require_enum(
        _get_field(damage_input, "damage_type"),
        DamageType,
        "damage_type",
        "Must be a valid damage type",
    )

    if isinstance(damage_input, DamageCalculationInput):
        return damage_input
    return _build(
        DamageCalculationInput,
        {
            "dice_count": dice_count,
            "dice_type": dice_type,
            "modifier": modifier,
            "damage_type": damage_type,
        },
    )


def validate_base_damage(base_damage: Any) -> DamageCalculationResult:
    """
    Validates a previously computed damage result.

    Args:
        base_damage (Any):
            A DamageCalculationResult or an equivalent mapping.

    Returns:
        DamageCalculationResult: The validated result.

    Raises:
        InvalidDamageInputError: If the result is missing or malformed.

    """
    if base_damage is None:
        raise InvalidDamageInputError("base_damage", None, "Cannot be None")

    total_damage = _get_field(base_damage, "total_damage")
    if not _is_int(total_damage) or total_damage < 0:
        raise InvalidDamageInputError(
            "total_damage",
            None if total_damage is _MISSING else total_damage,
            "Must be a non-negative integer",
        )

    dice_rolls = _get_field(base_damage, "dice_rolls")
    if not isinstance(dice_rolls, Sequence) or isinstance(dice_rolls, (str, bytes)):
        raise InvalidDamageInputError(
            "dice_rolls",
            None if dice_rolls is _MISSING else dice_rolls,
            "Must be a list",
        )

    damage_type = _require_enum(
        _get_field(base_damage, "damage_type"),
        DamageType,
        "damage_type",
        "Must be a valid damage type",
    )

    if isinstance(base_damage, DamageCalculationResult):
        return base_damage

    data = {
        "total_damage": total_damage,
        "dice_rolls": tuple(dice_rolls),
        "damage_type": damage_type,
    }
    for name in ("modifier", "is_critical"):
        field_value = _get_field(base_damage, name)
        if field_value is not _MISSING:
            data[name] = field_value
    return _build(DamageCalculationResult, data)


def validate_resistance_type(
    resistance_type: Any, field: str = "resistance_type"
) -> ResistanceType:
    """Validates a resistance classification."""
    return _require_enum(
        resistance_type,
        ResistanceType,
        field,
        "Must be one of: " + ", ".join(r.value for r in ResistanceType),
    )


def validate_distribution_method(method: Any) -> DistributionMethod:
    """Validates a distribution method name."""
    return _require_enum(
        method,
        DistributionMethod,
        "distribution_method",
        "Must be one of: " + ", ".join(m.value for m in DistributionMethod),
    )


def validate_targets(
    targets: Any,
    limits: DamageCalculationLimits = DAMAGE_CALCULATION_LIMITS,
) -> list[DamageDistributionTarget]:
    """
    Validates the targets of a damage distribution.

    Args:
        targets (Any):
            A list of DamageDistributionTarget models or equivalent mappings.
        limits (DamageCalculationLimits):
            The bounds to enforce.

    Returns:
        list[DamageDistributionTarget]: The validated targets, in input order.

    Raises:
        InvalidDamageInputError: If the list is empty or a target is malformed.
        DamageCalculationLimitError: If there are too many targets.

    """
    if not isinstance(targets, (list, tuple)):
        raise InvalidDamageInputError("targets", targets, "Must be a list")
    if len(targets) == 0:
        raise InvalidDamageInputError(
            "targets", len(targets), "Must have at least one target"
        )
    if len(targets) > limits.max_targets:
        raise DamageCalculationLimitError(
            "Target count", len(targets), limits.max_targets
        )

    validated: list[DamageDistributionTarget] = []
    seen_ids: set[str] = set()
    for index, target in enumerate(targets):
        prefix = f"targets[{index}]"
        if target is None:
            raise InvalidDamageInputError(prefix, None, "Target cannot be None")

        target_id = _get_field(target, "id")
        if not isinstance(target_id, str) or not target_id.strip():
            raise InvalidDamageInputError(
                f"{prefix}.id",
                None if target_id is _MISSING else target_id,
                "Target ID is required",
            )
        if target_id in seen_ids:
            raise InvalidDamageInputError(
                f"{prefix}.id", target_id, "Target ID must be unique"
            )
        seen_ids.add(target_id)

        name = _get_field(target, "name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidDamageInputError(
                f"{prefix}.name",
                None if name is _MISSING else name,
                "Target name is required",
            )

        resistance_type = validate_resistance_type(
            _get_field(target, "resistance_type"), f"{prefix}.resistance_type"
        )

        if isinstance(target, DamageDistributionTarget):
            validated.append(target)
        else:
            validated.append(
                _build(
                    DamageDistributionTarget,
                    {"id": target_id, "name": name, "resistance_type": resistance_type},
                    prefix=f"{prefix}.",
                )
            )
    return validated
