"""
Main entry point for the damage engine demo.

Rolls a damage preset (normally or as a critical hit), prints its statistics
and shows how the roll lands on a few targets with different resistances.
"""

import argparse
import logging
import sys

from damage_engine.combat.damage import DamageDistributionTarget
from damage_engine.combat.service import DamageCalculationService
from damage_engine.core.constants import DistributionMethod, ResistanceType
from damage_engine.core.errors import DamageCalculationServiceError
from damage_engine.core.logging import setup_logging
from damage_engine.core.sheets import (
    describe_damage,
    describe_statistics,
    describe_targets,
    print_preset_sheet,
)
from damage_engine.core.utils import cprint, crule

DEMO_TARGETS = [
    DamageDistributionTarget(
        id="goblin", name="Goblin", resistance_type=ResistanceType.NORMAL
    ),
    DamageDistributionTarget(
        id="golem", name="Stone Golem", resistance_type=ResistanceType.RESISTANT
    ),
    DamageDistributionTarget(
        id="troll", name="Troll", resistance_type=ResistanceType.VULNERABLE
    ),
    DamageDistributionTarget(
        id="elemental", name="Elemental", resistance_type=ResistanceType.IMMUNE
    ),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="damage-engine",
        description="Roll damage presets and apply them to sample targets.",
    )
    parser.add_argument("preset", nargs="?", help="Preset id or name to roll")
    parser.add_argument("--modifier", type=int, default=None, help="Override modifier")
    parser.add_argument("--critical", action="store_true", help="Roll a critical hit")
    parser.add_argument(
        "--method",
        choices=[method.value for method in DistributionMethod],
        default=DistributionMethod.EQUAL.value,
        help="How the roll is distributed across the sample targets",
    )
    parser.add_argument("--list", action="store_true", help="List available presets")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    service = DamageCalculationService()

    if args.list or not args.preset:
        crule("Damage Presets", style="bold green")
        for preset in service.get_all_presets():
            print_preset_sheet(preset)
        return 0

    try:
        preset = service.get_preset_by_name(args.preset)
        if preset is None:
            return _fail(f"Unknown preset '{args.preset}'")
        damage_input = preset.to_input(args.modifier)
        if args.critical:
            result = service.calculate_critical_damage(damage_input)
        else:
            result = service.calculate_damage(damage_input)
        stats = service.get_damage_statistics(damage_input)
        shares = service.distribute_damage_to_targets(result, DEMO_TARGETS, args.method)
    except DamageCalculationServiceError as e:
        return _fail(f"{e.code}: {e.message}")

    crule(preset.name, style="bold green")
    cprint(describe_damage(result))
    cprint(describe_statistics(stats))
    crule(f"Targets ({args.method})", style="bold blue", characters="-")
    for line in describe_targets(shares):
        cprint(f"  {line}")
    return 0


def _fail(message: str) -> int:
    cprint(f"[bold red]{message}[/]")
    return 1


if __name__ == "__main__":
    sys.exit(main())
