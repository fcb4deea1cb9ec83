"""Spell models.

A spell is an immutable, shared definition. Wizards reference spells from
their ``known_spells`` and ``protected_from`` collections, and scrolls and
concoctions bind them; membership in those collections is by identity.

Casting follows a fixed protocol (see Spell.cast); each variant only
supplies its effect through ``do_effect``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Self

from pydantic import ConfigDict, Field, model_validator

from wizard_economy.core.constants import MAX_PERCENTAGE
from wizard_economy.core.exceptions import require
from wizard_economy.core.logging import get_logger
from wizard_economy.models.base import EconomyEntity
from wizard_economy.models.capabilities import (
    MagicEffectRealization,
    MagicSource,
    label,
)
from wizard_economy.models.enums import EffectStat, MagicLevel


logger = get_logger(__name__)


class Spell(EconomyEntity):
    """Base class of all spells.

    Attributes:
        name: Spell name, never empty.
        mana_cost: Mana the source pays per cast.
        level_needed: Minimum magic level of the source.

    Example:
        >>> fireball = AttackingSpell(
        ...     name="Confringo", mana_cost=10, level_needed=MagicLevel.NOOB,
        ...     stat=EffectStat.HP, amount=20,
        ... )
        >>> str(fireball)
        '[Confringo(*): 10 mana; -20 HP]'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Spell name")
    mana_cost: int = Field(ge=0, description="Mana paid per cast")
    level_needed: MagicLevel = Field(description="Minimum level of the mana source")

    def cast(self, source: MagicSource, target: MagicEffectRealization) -> bool:
        """Cast the spell from ``source`` onto ``target``.

        Protection is checked before any mana is requested, so a blocked
        spell costs nothing. If the source refuses to provide mana the
        spell fizzles without effect.

        Args:
            source: Pays the mana cost (a wizard, or the item casting it).
            target: Receives the effect.

        Returns:
            True if the effect was applied.

        Raises:
            ContractViolationError: If source or target is None.
        """
        require(source is not None, "source must not be None", argument="source")
        require(target is not None, "target must not be None", argument="target")

        if target.is_protected(self):
            logger.debug("Spell blocked by protection", spell=self.name, target=label(target))
            return False
        if not source.provide_mana(self.level_needed, self.mana_cost):
            logger.debug(
                "Spell fizzled",
                spell=self.name,
                source=label(source),
                mana_cost=self.mana_cost,
                level_needed=self.level_needed.name,
            )
            return False

        self.do_effect(target)
        logger.debug("Spell cast", spell=self.name, source=label(source), target=label(target))
        return True

    @abstractmethod
    def do_effect(self, target: MagicEffectRealization) -> None:
        """Apply this spell's effect to ``target``."""

    def effect_summary(self) -> str:
        """Describe the effect for display; empty for plain spells."""
        return ""

    def __str__(self) -> str:
        return f"[{self.name}({self.level_needed}): {self.mana_cost} mana{self.effect_summary()}]"


class StatSpell(Spell):
    """A spell that changes HP or MP by an absolute amount or a percentage.

    Attributes:
        stat: Whether HP or MP is affected.
        percentage: Interpret ``amount`` as a percentage of the target's
            basic value instead of an absolute amount.
        amount: Non-negative; at most 100 when ``percentage`` is set.
    """

    sign: ClassVar[str] = ""

    stat: EffectStat = Field(description="Affected attribute")
    percentage: bool = Field(default=False, description="Amount is a percentage")
    amount: int = Field(ge=0, description="Absolute amount or percentage")

    @model_validator(mode="after")
    def validate_percentage_amount(self) -> Self:
        """Ensure a percentage amount does not exceed 100."""
        if self.percentage and self.amount > MAX_PERCENTAGE:
            msg = f"Percentage amount must not exceed {MAX_PERCENTAGE}, got {self.amount}"
            raise ValueError(msg)
        return self

    def effect_summary(self) -> str:
        unit = " %" if self.percentage else ""
        return f"; {self.sign}{self.amount}{unit} {self.stat}"


class AttackingSpell(StatSpell):
    """Reduces the target's HP or MP.

    Targets can be protected against specific attacking spells.
    """

    sign: ClassVar[str] = "-"

    def do_effect(self, target: MagicEffectRealization) -> None:
        if self.stat == EffectStat.HP:
            if self.percentage:
                target.take_damage_percent(self.amount)
            else:
                target.take_damage(self.amount)
        elif self.percentage:
            target.weaken_magic_percent(self.amount)
        else:
            target.weaken_magic(self.amount)


class HealingSpell(StatSpell):
    """Increases the target's HP or MP."""

    sign: ClassVar[str] = "+"

    def do_effect(self, target: MagicEffectRealization) -> None:
        if self.stat == EffectStat.HP:
            if self.percentage:
                target.heal_percent(self.amount)
            else:
                target.heal(self.amount)
        elif self.percentage:
            target.enforce_magic_percent(self.amount)
        else:
            target.enforce_magic(self.amount)


__all__ = [
    "Spell",
    "StatSpell",
    "AttackingSpell",
    "HealingSpell",
]
