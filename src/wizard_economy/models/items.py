"""Magic item models.

Magic items are tradeable, can be the target of magic effects, and act as
their own mana source when they cast a bound spell. Each use consumes one
of the item's remaining usages; an exhausted item does nothing.

Items never check the target's protection. Only spells do, which is why a
scroll's bound spell can still be blocked while a potion cannot.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Self

from pydantic import Field, model_validator

from wizard_economy.core.constants import POTION_USAGE_WORDS, USAGE_WORDS, WEIGHT_UNIT, currency
from wizard_economy.core.exceptions import require
from wizard_economy.core.logging import get_logger
from wizard_economy.models.base import EconomyEntity
from wizard_economy.models.capabilities import (
    MagicEffectRealization,
    MagicSource,
    Tradeable,
    percent_of,
)
from wizard_economy.models.spells import Spell


logger = get_logger(__name__)


class MagicItem(EconomyEntity, Tradeable, MagicEffectRealization, MagicSource):
    """Base class of all magic items.

    Attributes:
        name: Item name, never empty.
        usages: Remaining usages; decremented once per successful use.
        price: Price in Knuts.
        weight: Weight in grams, counted against carrying capacity.
    """

    usage_words: ClassVar[tuple[str, str]] = USAGE_WORDS

    name: str = Field(min_length=1, description="Item name")
    usages: int = Field(ge=0, description="Remaining usages")
    price: int = Field(ge=0, description="Price in Knuts")
    weight: int = Field(ge=0, description="Weight in grams")

    def try_usage(self) -> bool:
        """Consume one usage if any is left.

        Returns:
            True if a usage was consumed.
        """
        if self.usages <= 0:
            return False
        self.usages -= 1
        return True

    def use_on(self, target: MagicEffectRealization) -> None:
        """Use the item on ``target``, consuming one usage.

        Raises:
            ContractViolationError: If target is None.
        """
        require(target is not None, "target must not be None", argument="target")
        if not self.try_usage():
            logger.debug("Item exhausted", item=self.name)
            return
        self.apply_effect(target)

    @abstractmethod
    def apply_effect(self, target: MagicEffectRealization) -> None:
        """Apply the item's effect once a usage has been consumed."""

    def take_damage_percent(self, percentage: int) -> None:
        """Degrade the item, losing ``percentage`` percent of its usages."""
        super().take_damage_percent(percentage)
        damage = percent_of(self.usages, percentage)
        self.usages = max(0, self.usages - damage)

    def usage_word(self) -> str:
        singular, plural = self.usage_words
        return singular if self.usages == 1 else plural

    def effect_summary(self) -> str:
        """Describe the effect for display; empty for plain items."""
        return ""

    def __str__(self) -> str:
        return (
            f"[{self.name}; {self.weight} {WEIGHT_UNIT}; {currency(self.price)}; "
            f"{self.usages} {self.usage_word()}{self.effect_summary()}]"
        )


class Potion(MagicItem):
    """A drinkable item; its usages are counted in gulps."""

    usage_words: ClassVar[tuple[str, str]] = POTION_USAGE_WORDS


class ManaPotion(Potion):
    """Restores a fixed amount of MP."""

    amount: int = Field(ge=0, description="MP restored per gulp")

    def apply_effect(self, target: MagicEffectRealization) -> None:
        target.enforce_magic(self.amount)

    def effect_summary(self) -> str:
        return f"; +{self.amount} MP"


class HealthPotion(Potion):
    """Restores a fixed amount of HP."""

    amount: int = Field(ge=0, description="HP restored per gulp")

    def apply_effect(self, target: MagicEffectRealization) -> None:
        target.heal(self.amount)

    def effect_summary(self) -> str:
        return f"; +{self.amount} HP"


class Scroll(MagicItem):
    """Casts its bound spell on the target, paying the mana itself.

    Attributes:
        spell: The spell cast on every use.
    """

    spell: Spell = Field(description="Bound spell")

    def apply_effect(self, target: MagicEffectRealization) -> None:
        self.spell.cast(self, target)

    def effect_summary(self) -> str:
        return f"; casts {self.spell}"


class Concoction(Potion):
    """Changes HP and MP at once and casts any number of spells.

    A concoction must have at least one effect: health and mana cannot
    both be zero while spells is empty.

    Attributes:
        health: HP change; positive heals, negative damages.
        mana: MP change; positive restores, negative drains.
        spells: Spells cast in order, with the concoction as mana source.

    Example:
        >>> brew = Concoction(name="My Brew", usages=4, price=2, weight=2, health=-5, mana=10)
        >>> str(brew)
        '[My Brew; 2 g; 2 Knuts; 4 gulps; -5 HP; +10 MP]'
    """

    health: int = Field(default=0, description="HP change")
    mana: int = Field(default=0, description="MP change")
    spells: list[Spell] = Field(default_factory=list, description="Spells cast on use")

    @model_validator(mode="after")
    def validate_has_effect(self) -> Self:
        """Ensure the concoction does something."""
        if self.health == 0 and self.mana == 0 and not self.spells:
            msg = "A concoction must have at least one effect"
            raise ValueError(msg)
        return self

    def apply_effect(self, target: MagicEffectRealization) -> None:
        if self.health > 0:
            target.heal(self.health)
        elif self.health < 0:
            target.take_damage(-self.health)

        if self.mana > 0:
            target.enforce_magic(self.mana)
        elif self.mana < 0:
            target.weaken_magic(-self.mana)

        for spell in self.spells:
            spell.cast(self, target)

    def effect_summary(self) -> str:
        parts = []
        if self.health != 0:
            parts.append(f"; {self.health:+d} HP")
        if self.mana != 0:
            parts.append(f"; {self.mana:+d} MP")
        if self.spells:
            parts.append(f"; cast [{', '.join(str(spell) for spell in self.spells)}]")
        return "".join(parts)


__all__ = [
    "MagicItem",
    "Potion",
    "ManaPotion",
    "HealthPotion",
    "Scroll",
    "Concoction",
]
