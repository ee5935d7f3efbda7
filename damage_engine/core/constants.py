"""
Constants and enumerations for the damage engine.

Defines the dice table, damage types, resistance classifications and
distribution methods used throughout the damage calculations.
"""

from enum import Enum


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class DiceType(NiceEnum):
    """Defines the die types that can be rolled."""

    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def faces(self) -> int:
        """Returns the number of faces of this die."""
        return DICE_VALUES[self]


# The dice table.
DICE_VALUES: dict[DiceType, int] = {
    DiceType.D4: 4,
    DiceType.D6: 6,
    DiceType.D8: 8,
    DiceType.D10: 10,
    DiceType.D12: 12,
    DiceType.D20: 20,
    DiceType.D100: 100,
}


class DamageType(NiceEnum):
    """Defines various types of damage that can be inflicted."""

    ACID = "acid"
    BLUDGEONING = "bludgeoning"
    COLD = "cold"
    FIRE = "fire"
    FORCE = "force"
    LIGHTNING = "lightning"
    NECROTIC = "necrotic"
    PIERCING = "piercing"
    POISON = "poison"
    PSYCHIC = "psychic"
    RADIANT = "radiant"
    SLASHING = "slashing"
    THUNDER = "thunder"

    @property
    def category(self) -> str:
        """Returns the category this damage type belongs to."""
        for category, members in DAMAGE_TYPE_CATEGORIES.items():
            if self in members:
                return category
        return "other"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this damage type."""
        return {
            DamageType.PIERCING: "🗡️",
            DamageType.SLASHING: "🪓",
            DamageType.BLUDGEONING: "🔨",
            DamageType.FIRE: "🔥",
            DamageType.COLD: "❄️",
            DamageType.LIGHTNING: "⚡",
            DamageType.THUNDER: "🌩️",
            DamageType.POISON: "☠️",
            DamageType.NECROTIC: "🖤",
            DamageType.RADIANT: "✨",
            DamageType.PSYCHIC: "💫",
            DamageType.FORCE: "🌀",
            DamageType.ACID: "🧪",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this damage type."""
        return {
            DamageType.PIERCING: "bold magenta",
            DamageType.SLASHING: "bold yellow",
            DamageType.BLUDGEONING: "bold red",
            DamageType.FIRE: "bold red",
            DamageType.COLD: "bold cyan",
            DamageType.LIGHTNING: "bold blue",
            DamageType.THUNDER: "bold purple",
            DamageType.POISON: "bold green",
            DamageType.NECROTIC: "dim white",
            DamageType.RADIANT: "bold white",
            DamageType.PSYCHIC: "magenta",
            DamageType.FORCE: "cyan",
            DamageType.ACID: "green",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies damage type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


DAMAGE_TYPE_CATEGORIES: dict[str, tuple[DamageType, ...]] = {
    "physical": (DamageType.BLUDGEONING, DamageType.PIERCING, DamageType.SLASHING),
    "elemental": (
        DamageType.ACID,
        DamageType.COLD,
        DamageType.FIRE,
        DamageType.LIGHTNING,
        DamageType.THUNDER,
    ),
    "energy": (DamageType.FORCE, DamageType.NECROTIC, DamageType.RADIANT),
    "mental": (DamageType.PSYCHIC,),
    "toxic": (DamageType.POISON,),
}


class ResistanceType(NiceEnum):
    """Defines how a target mitigates incoming damage."""

    NORMAL = "normal"
    RESISTANT = "resistant"
    VULNERABLE = "vulnerable"
    IMMUNE = "immune"

    @property
    def color(self) -> str:
        """Returns the color string associated with this resistance type."""
        return {
            ResistanceType.RESISTANT: "bold yellow",
            ResistanceType.VULNERABLE: "bold red",
            ResistanceType.IMMUNE: "dim white",
        }.get(self, "white")

    def colorize(self, message: str) -> str:
        """Applies resistance type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


# Multipliers applied to incoming damage, halving rounds down.
RESISTANCE_MULTIPLIERS: dict[ResistanceType, float] = {
    ResistanceType.NORMAL: 1,
    ResistanceType.RESISTANT: 0.5,
    ResistanceType.VULNERABLE: 2,
    ResistanceType.IMMUNE: 0,
}


class DistributionMethod(NiceEnum):
    """Defines how one base damage roll is assigned to several targets."""

    # Every target takes the full rolled total.
    EQUAL = "equal"
    # Every target takes half the rolled total (successful save).
    HALF = "half"
    # The rolled total is split into one share per target.
    SPLIT = "split"
