"""
Preset catalog for the damage engine.

Named, reusable damage specifications (weapons and spells) loaded once from
the packaged JSON data and exposed read-only.
"""

import json
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError

from damage_engine.combat.damage import DamageCalculationInput, DamageModel
from damage_engine.core.constants import DamageType, DiceType

# Path of the packaged preset data.
DEFAULT_PRESETS_FILE = Path(__file__).parent.parent / "data" / "damage_presets.json"


class DamagePreset(DamageModel):
    """A named damage specification."""

    id: str = Field(description="Unique preset identifier (e.g., 'fireball')")
    name: str = Field(description="Display name of the preset")
    description: str = Field(default="", description="Short description")
    dice_count: int = Field(description="Number of dice to roll")
    dice_type: DiceType = Field(description="Type of die to roll")
    modifier: int = Field(default=0, description="Flat bonus added to the dice")
    damage_type: DamageType = Field(description="The type of damage dealt")
    tags: frozenset[str] = Field(
        default=frozenset(),
        description="Free-form tags used for filtering",
    )

    def to_input(self, modifier_override: int | None = None) -> DamageCalculationInput:
        """
        Builds a damage input from the preset.

        Args:
            modifier_override (int | None):
                Replaces the preset modifier when provided.

        Returns:
            DamageCalculationInput: The damage specification to roll.

        """
        return DamageCalculationInput(
            dice_count=self.dice_count,
            dice_type=self.dice_type,
            modifier=self.modifier if modifier_override is None else modifier_override,
            damage_type=self.damage_type,
        )


class PresetCatalog:
    """Read-only collection of damage presets."""

    def __init__(self, presets: Iterable[DamagePreset]) -> None:
        self._presets: tuple[DamagePreset, ...] = tuple(presets)
        seen: set[str] = set()
        for preset in self._presets:
            if preset.id in seen:
                raise ValueError(f"Duplicate damage preset id: '{preset.id}'")
            seen.add(preset.id)

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def get(self, name: str) -> DamagePreset | None:
        """
        Looks up a preset by id, falling back to its display name.

        Args:
            name (str): The preset id or display name.

        Returns:
            DamagePreset | None: The preset, or None if it is not in the catalog.

        """
        for preset in self._presets:
            if preset.id == name:
                return preset
        lowered = name.strip().lower()
        for preset in self._presets:
            if preset.name.lower() == lowered:
                return preset
        return None

    def all(self) -> list[DamagePreset]:
        """Returns a new list holding every preset."""
        return list(self._presets)

    def by_tag(self, tag: str) -> list[DamagePreset]:
        """Returns a new list holding the presets carrying the tag."""
        return [preset for preset in self._presets if tag in preset.tags]


def load_presets(filepath: Path) -> list[DamagePreset]:
    """
    Loads damage presets from a JSON file holding a list of objects.

    Args:
        filepath (Path): The file to load.

    Returns:
        list[DamagePreset]: The parsed presets.

    Raises:
        ValueError: If the file is missing, malformed or holds invalid presets.

    """
    try:
        if not filepath.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return [DamagePreset.model_validate(entry) for entry in data]
    except (json.JSONDecodeError, FileNotFoundError, ValidationError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e


@lru_cache(maxsize=1)
def _default_presets() -> tuple[DamagePreset, ...]:
    return tuple(load_presets(DEFAULT_PRESETS_FILE))


def default_catalog() -> PresetCatalog:
    """Builds a catalog holding the packaged presets."""
    return PresetCatalog(_default_presets())
