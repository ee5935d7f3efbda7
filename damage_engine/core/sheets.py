"""
Module for describing damage results in a formatted way.
"""

from collections.abc import Sequence

from damage_engine.combat.damage import (
    DamageCalculationResult,
    DamageWithResistanceResult,
    TargetDamageResult,
)
from damage_engine.combat.presets import DamagePreset
from damage_engine.combat.statistics import DamageStatistics
from damage_engine.core.utils import cprint


def modifier_to_string(modifier: int) -> str:
    """Formats a flat modifier with its sign, empty when zero."""
    return f"{modifier:+d}" if modifier else ""


def describe_damage(result: DamageCalculationResult) -> str:
    """
    Describes a damage result with rich markup.

    Args:
        result (DamageCalculationResult): The result to describe.

    Returns:
        str: e.g. "12 🔥 Fire (4+5+3)".

    """
    rolls = "+".join(str(roll) for roll in result.dice_rolls)
    breakdown = f"{rolls}{modifier_to_string(result.modifier)}" or "0"
    text = (
        f"{result.damage_type.colorize(str(result.total_damage))} "
        f"{result.damage_type.emoji} "
        f"{result.damage_type.colored_name} "
        f"[dim]({breakdown})[/]"
    )
    if result.is_critical:
        text += " [bold red]CRITICAL[/]"
    if isinstance(result, DamageWithResistanceResult):
        if result.adjusted_damage != result.original_damage:
            text += (
                f" {result.resistance_type.colorize(result.resistance_type.value)}"
                f" [dim]({result.original_damage} → {result.adjusted_damage})[/]"
            )
    return text


def describe_targets(results: Sequence[TargetDamageResult]) -> list[str]:
    """Describes each target's share of a distributed damage roll."""
    lines: list[str] = []
    for result in results:
        line = (
            f"{result.target_name}: "
            f"{result.damage_type.colorize(str(result.adjusted_damage))} "
            f"{result.damage_type.emoji}"
        )
        if result.adjusted_damage != result.original_damage:
            line += (
                f" {result.resistance_type.colorize(result.resistance_type.value)}"
                f" [dim]({result.original_damage} → {result.adjusted_damage})[/]"
            )
        lines.append(line)
    return lines


def describe_statistics(stats: DamageStatistics) -> str:
    """Describes a damage range and its expected value."""
    return (
        f"min [bold]{stats.minimum}[/], "
        f"max [bold]{stats.maximum}[/], "
        f"avg [bold]{stats.average:g}[/]"
    )


def print_preset_sheet(preset: DamagePreset, padding: int = 2) -> None:
    """
    Prints the details of a preset in a formatted way.

    Args:
        preset (DamagePreset): The preset to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    expr = f"{preset.dice_count}{preset.dice_type}{modifier_to_string(preset.modifier)}"
    sheet = f"[blue]{preset.name}[/] ({preset.id}), "
    if preset.description:
        sheet += f'[italic]"{preset.description}"[/], '
    sheet += f"{preset.damage_type.colorize(expr)} {preset.damage_type.emoji}"
    if preset.tags:
        sheet += f" [dim]{', '.join(sorted(preset.tags))}[/]"
    cprint(" " * padding + sheet)
