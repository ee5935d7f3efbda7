"""
Configuration for the damage engine.

Holds the validated bounds every calculation is checked against.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DamageCalculationLimits(BaseModel):
    """Bounds enforced by the validation layer before any dice are rolled."""

    model_config = ConfigDict(frozen=True)

    max_dice_count: int = Field(
        default=100,
        description="Maximum number of dice in a single calculation",
    )
    min_modifier: int = Field(
        default=-999,
        description="Lowest flat modifier accepted",
    )
    max_modifier: int = Field(
        default=999,
        description="Highest flat modifier accepted",
    )
    max_targets: int = Field(
        default=50,
        description="Maximum number of targets in a distribution call",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.max_dice_count < 0:
            raise ValueError("max_dice_count must be non-negative")
        if self.max_targets < 1:
            raise ValueError("max_targets must be at least 1")
        if self.min_modifier > self.max_modifier:
            raise ValueError("min_modifier must not exceed max_modifier")


DAMAGE_CALCULATION_LIMITS = DamageCalculationLimits()
