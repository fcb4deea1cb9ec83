"""Enumeration types for the wizard economy."""

from __future__ import annotations

from enum import IntEnum, StrEnum

from wizard_economy.core.constants import TIER_GLYPH


class MagicLevel(IntEnum):
    """Proficiency tiers of a wizard.

    Levels compare by rank. A spell can only be cast by a source whose
    level is at least the spell's ``level_needed``, and a wizard's
    ``basic_mp`` must be at least the mana budget of its level.

    Levels:
        NOOB: 50 mana.
        ADEPT: 100 mana.
        STUDENT: 200 mana.
        EXPERT: 500 mana.
        MASTER: 1000 mana.
    """

    NOOB = 1
    ADEPT = 2
    STUDENT = 3
    EXPERT = 4
    MASTER = 5

    @property
    def mana(self) -> int:
        """Get the mana budget of this level.

        Returns:
            Minimum basic mana of a wizard at this level.
        """
        budgets = {
            MagicLevel.NOOB: 50,
            MagicLevel.ADEPT: 100,
            MagicLevel.STUDENT: 200,
            MagicLevel.EXPERT: 500,
            MagicLevel.MASTER: 1000,
        }
        return budgets[self]

    @property
    def stars(self) -> str:
        """Get the display marker, one glyph per rank.

        Returns:
            e.g. '***' for STUDENT.
        """
        return TIER_GLYPH * self.value

    def __str__(self) -> str:
        return self.stars


class EffectStat(StrEnum):
    """The attribute a stat spell acts on."""

    HP = "HP"
    MP = "MP"


__all__ = [
    "MagicLevel",
    "EffectStat",
]
