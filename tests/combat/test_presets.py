"""
Tests for the damage preset catalog.
"""

import json

import pytest
from damage_engine.combat.presets import (
    DEFAULT_PRESETS_FILE,
    DamagePreset,
    PresetCatalog,
    default_catalog,
    load_presets,
)
from damage_engine.core.constants import DamageType, DiceType
from pydantic import ValidationError


@pytest.fixture
def catalog():
    return default_catalog()


def test_packaged_presets_load():
    presets = load_presets(DEFAULT_PRESETS_FILE)
    ids = {preset.id for preset in presets}
    assert {
        "shortsword",
        "longsword",
        "longsword-two-handed",
        "fireball",
        "burning-hands",
        "magic-missile",
    } <= ids


def test_get_by_id(catalog):
    preset = catalog.get("shortsword")
    assert preset is not None
    assert preset.name == "Shortsword"
    assert preset.dice_type is DiceType.D6
    assert preset.damage_type is DamageType.PIERCING
    assert "weapon" in preset.tags


def test_get_by_display_name(catalog):
    preset = catalog.get("longsword (two-handed)")
    assert preset is not None
    assert preset.id == "longsword-two-handed"
    assert preset.dice_type is DiceType.D10


def test_get_unknown_returns_none(catalog):
    assert catalog.get("nonexistent") is None
    assert "nonexistent" not in catalog
    assert "fireball" in catalog


def test_all_returns_a_copy(catalog):
    presets = catalog.all()
    size = len(presets)
    presets.clear()
    assert len(catalog.all()) == size
    assert len(catalog) == size


def test_presets_are_immutable(catalog):
    preset = catalog.get("fireball")
    with pytest.raises(ValidationError):
        preset.dice_count = 20
    assert catalog.get("fireball").dice_count == 8


def test_by_tag(catalog):
    weapons = catalog.by_tag("weapon")
    assert weapons
    assert all("weapon" in preset.tags for preset in weapons)
    assert catalog.by_tag("nonexistent") == []


def test_to_input_uses_preset_or_override(catalog):
    preset = catalog.get("magic-missile")
    assert preset.to_input().modifier == 1
    damage_input = preset.to_input(modifier_override=4)
    assert damage_input.modifier == 4
    assert damage_input.dice_type is DiceType.D4
    assert damage_input.damage_type is DamageType.FORCE


def test_override_of_zero_is_kept(catalog):
    assert catalog.get("magic-missile").to_input(0).modifier == 0


def test_duplicate_ids_are_rejected():
    preset = DamagePreset(
        id="club",
        name="Club",
        dice_count=1,
        dice_type="d4",
        damage_type="bludgeoning",
    )
    with pytest.raises(ValueError):
        PresetCatalog([preset, preset])


def test_load_presets_from_file(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "ray-of-frost",
                    "name": "Ray of Frost",
                    "diceCount": 1,
                    "diceType": "d8",
                    "damageType": "cold",
                    "tags": ["spell", "cantrip"],
                }
            ]
        ),
        encoding="utf-8",
    )
    presets = load_presets(path)
    assert len(presets) == 1
    assert presets[0].tags == frozenset({"spell", "cantrip"})
    assert presets[0].modifier == 0


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"id": "club"}',
        '[{"id": "club", "name": "Club", "dice_type": "d3"}]',
    ],
)
def test_load_presets_rejects_bad_files(tmp_path, content):
    path = tmp_path / "presets.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_presets(path)


def test_load_presets_missing_file(tmp_path):
    with pytest.raises(ValueError):
        load_presets(tmp_path / "missing.json")
