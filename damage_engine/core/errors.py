"""
Error taxonomy for the damage engine.

Every failure raised by the engine derives from DamageCalculationServiceError
and carries a machine-readable code, an HTTP-style status code and the
ErrorKind it belongs to, so callers can branch on the kind instead of parsing
messages.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Closed set of failure kinds the engine can report."""

    INVALID_INPUT = "INVALID_DAMAGE_INPUT"
    LIMIT_EXCEEDED = "DAMAGE_CALCULATION_LIMIT"
    PRESET_NOT_FOUND = "PRESET_NOT_FOUND"
    DICE_ROLL_FAILURE = "DICE_ROLL_ERROR"
    SERVICE_FAILURE = "DAMAGE_CALCULATION_ERROR"

    @property
    def code(self) -> str:
        return self.value


class DamageCalculationServiceError(Exception):
    """Base error for every failure surfaced by the damage engine."""

    kind: ErrorKind = ErrorKind.SERVICE_FAILURE
    default_status_code: int = 400

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = (
            status_code if status_code is not None else self.default_status_code
        )
        self.details: dict[str, Any] = dict(details or {})

    @property
    def code(self) -> str:
        return self.kind.code

    def to_dict(self) -> dict[str, Any]:
        """Renders the error as a plain dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": dict(self.details),
        }


class InvalidDamageInputError(DamageCalculationServiceError):
    """A field failed a type, shape or non-negativity check."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, field: str, value: Any, constraint: str) -> None:
        super().__init__(
            f"Invalid {field}: {value!r}. {constraint}",
            details={"field": field, "value": value, "constraint": constraint},
        )
        self.field = field
        self.value = value
        self.constraint = constraint


class DamageCalculationLimitError(DamageCalculationServiceError):
    """A field exceeded one of the configured bounds."""

    kind = ErrorKind.LIMIT_EXCEEDED

    def __init__(self, limit_name: str, value: Any, limit: int) -> None:
        super().__init__(
            f"{limit_name} {value} exceeds limit of {limit}",
            details={"limit_name": limit_name, "value": value, "limit": limit},
        )
        self.limit_name = limit_name
        self.value = value
        self.limit = limit


class PresetNotFoundError(DamageCalculationServiceError):
    """The requested preset does not exist in the catalog."""

    kind = ErrorKind.PRESET_NOT_FOUND
    default_status_code = 404

    def __init__(self, preset_name: str) -> None:
        super().__init__(
            f"Damage preset '{preset_name}' not found",
            details={"preset_name": preset_name},
        )
        self.preset_name = preset_name


class DiceRollError(DamageCalculationServiceError):
    """The random source failed while rolling dice."""

    kind = ErrorKind.DICE_ROLL_FAILURE
    default_status_code = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(f"Dice roll failed: {message}", details=details)
