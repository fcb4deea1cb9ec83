"""The Wizard actor.

Wizards are the only actors of the economy. A wizard is a mana source, a
trader and a target of magic effects at the same time. It casts spells it
knows, uses and sells items it carries, and steals from or loots other
traders.

A wizard whose HP has dropped to 0 is dead. Dead wizards cannot act
(learn, cast, use, sell, pay, earn, provide mana, steal, loot) but can
still be healed and looted.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self

from pydantic import Field, computed_field, field_validator, model_validator

from wizard_economy.core.constants import currency
from wizard_economy.core.exceptions import require
from wizard_economy.core.logging import get_logger
from wizard_economy.engine.selection import IndexSelector, default_selector
from wizard_economy.models.base import EconomyEntity
from wizard_economy.models.capabilities import (
    MagicEffectRealization,
    MagicSource,
    Tradeable,
    Trader,
    check_amount,
    label,
    percent_of,
)
from wizard_economy.models.enums import MagicLevel
from wizard_economy.models.spells import AttackingSpell, Spell


logger = get_logger(__name__)


class Wizard(EconomyEntity, MagicSource, Trader, MagicEffectRealization):
    """A magic-wielding, trading actor.

    Attributes:
        name: Wizard name, never empty.
        level: Magic level; gates which spells can be cast.
        basic_hp: Base for percentage HP effects.
        hp: Current health.
        basic_mp: Base for percentage MP effects; at least ``level.mana``.
        mp: Current mana.
        money: Current money in Knuts.
        known_spells: Spells the wizard can cast.
        protected_from: Attacking spells that have no effect on the wizard.
        carrying_capacity: Maximum total weight of the inventory.
        inventory: Carried items; total weight never exceeds the capacity.
        selector: Picks items and spells for the random actions.

    Level, basic values, capacity and the three collections cannot be
    reassigned after construction; the collections change only through
    learn/forget, add_to_inventory/remove_from_inventory and
    set_protection/remove_protection.

    Construction does not check that an item has a single owner. Building
    two wizards from the same item list puts the same item objects into
    both inventories; keeping ownership unique is up to the caller.

    Example:
        >>> wizard = Wizard(
        ...     name="Ignatius", level=MagicLevel.ADEPT,
        ...     basic_hp=100, hp=70, basic_mp=150, mp=100,
        ...     money=72, carrying_capacity=50,
        ... )
        >>> str(wizard)
        '[Ignatius(**): 70/100 100/150; 72 Knuts; knows []; carries []]'
    """

    name: str = Field(min_length=1, description="Wizard name")
    level: MagicLevel = Field(frozen=True, description="Magic level")
    basic_hp: int = Field(ge=0, frozen=True, description="Base for percentage HP effects")
    hp: int = Field(ge=0, description="Current health")
    basic_mp: int = Field(ge=0, frozen=True, description="Base for percentage MP effects")
    mp: int = Field(ge=0, description="Current mana")
    money: int = Field(default=0, ge=0, description="Money in Knuts")
    known_spells: list[Spell] = Field(default_factory=list, frozen=True)
    protected_from: list[AttackingSpell] = Field(default_factory=list, frozen=True)
    carrying_capacity: int = Field(ge=0, frozen=True, description="Maximum inventory weight")
    inventory: list[Tradeable] = Field(default_factory=list, frozen=True)
    selector: IndexSelector = Field(default_factory=default_selector, exclude=True, repr=False)

    @field_validator("known_spells", "protected_from", "inventory", mode="after")
    @classmethod
    def drop_duplicates(cls, value: list[Any]) -> list[Any]:
        """Keep the first occurrence of every entry, preserving order."""
        return list(dict.fromkeys(value))

    @model_validator(mode="after")
    def validate_invariants(self) -> Self:
        """Check the level's mana budget and the carrying capacity."""
        if self.basic_mp < self.level.mana:
            msg = (
                f"basic_mp ({self.basic_mp}) must be at least the mana of level "
                f"{self.level.name} ({self.level.mana})"
            )
            raise ValueError(msg)
        if self.inventory_weight > self.carrying_capacity:
            msg = (
                f"Inventory weight ({self.inventory_weight}) exceeds carrying "
                f"capacity ({self.carrying_capacity})"
            )
            raise ValueError(msg)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def inventory_weight(self) -> int:
        """Total weight of the inventory."""
        return sum(item.weight for item in self.inventory)

    def is_dead(self) -> bool:
        """A wizard with no HP left is dead."""
        return self.hp <= 0

    # -------------------------------------------------------------------------
    # Spells
    # -------------------------------------------------------------------------

    def learn(self, spell: Spell) -> bool:
        """Add ``spell`` to the known spells.

        Returns:
            True if the spell was new. False if it was already known or the
            wizard is dead.

        Raises:
            ContractViolationError: If spell is None.
        """
        require(spell is not None, "spell must not be None", argument="spell")
        if self.is_dead() or spell in self.known_spells:
            return False
        self.known_spells.append(spell)
        return True

    def forget(self, spell: Spell) -> bool:
        """Remove ``spell`` from the known spells.

        Returns:
            True if the spell was known. False if it was not or the wizard
            is dead.

        Raises:
            ContractViolationError: If spell is None.
        """
        require(spell is not None, "spell must not be None", argument="spell")
        if self.is_dead() or spell not in self.known_spells:
            return False
        self.known_spells.remove(spell)
        return True

    def cast_spell(self, spell: Spell, target: MagicEffectRealization) -> bool:
        """Cast a known spell on ``target`` with this wizard as mana source.

        Returns:
            True if the cast was attempted, regardless of whether the
            target was protected or the mana was insufficient. False if
            the wizard is dead or does not know the spell.

        Raises:
            ContractViolationError: If spell or target is None.
        """
        require(spell is not None, "spell must not be None", argument="spell")
        require(target is not None, "target must not be None", argument="target")
        if self.is_dead() or spell not in self.known_spells:
            return False
        spell.cast(self, target)
        return True

    def cast_random_spell(self, target: MagicEffectRealization) -> bool:
        """Cast a randomly chosen known spell on ``target``.

        Returns:
            False if the wizard is dead or knows no spell, otherwise the
            result of cast_spell. A dead wizard draws nothing from its selector.
        """
        if self.is_dead() or not self.known_spells:
            return False
        spell = self.known_spells[self.selector.pick_index(len(self.known_spells))]
        return self.cast_spell(spell, target)

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    def use_item(self, item: Tradeable, target: MagicEffectRealization) -> bool:
        """Use a carried item on ``target``.

        Returns:
            True if the item was used. False if the wizard is dead or does
            not carry the item.

        Raises:
            ContractViolationError: If item or target is None.
        """
        require(item is not None, "item must not be None", argument="item")
        require(target is not None, "target must not be None", argument="target")
        if self.is_dead() or item not in self.inventory:
            return False
        item.use_on(target)
        return True

    def use_random_item(self, target: MagicEffectRealization) -> bool:
        """Use a randomly chosen carried item on ``target``.

        Returns:
            False if the wizard is dead or carries nothing, otherwise the
            result of use_item.
        """
        if self.is_dead() or not self.inventory:
            return False
        item = self.inventory[self.selector.pick_index(len(self.inventory))]
        return self.use_item(item, target)

    def sell_item(self, item: Tradeable, buyer: Trader) -> bool:
        """Sell ``item`` to ``buyer`` at the item's price.

        Returns:
            The result of the purchase, or False if the wizard is dead.

        Raises:
            ContractViolationError: If item or buyer is None.
        """
        require(item is not None, "item must not be None", argument="item")
        require(buyer is not None, "buyer must not be None", argument="buyer")
        if self.is_dead():
            return False
        return item.purchase(self, buyer)

    def sell_random_item(self, buyer: Trader) -> bool:
        """Sell a randomly chosen carried item to ``buyer``.

        Returns:
            False if the wizard is dead or carries nothing, otherwise the
            result of sell_item.
        """
        if self.is_dead() or not self.inventory:
            return False
        item = self.inventory[self.selector.pick_index(len(self.inventory))]
        return self.sell_item(item, buyer)

    # -------------------------------------------------------------------------
    # MagicSource
    # -------------------------------------------------------------------------

    def provide_mana(self, level_needed: MagicLevel, amount: int) -> bool:
        """Pay ``amount`` MP if alive, skilled enough and not short of mana."""
        super().provide_mana(level_needed, amount)
        if self.is_dead() or self.level < level_needed or self.mp < amount:
            return False
        self.mp -= amount
        return True

    # -------------------------------------------------------------------------
    # Trader
    # -------------------------------------------------------------------------

    def possesses(self, item: Tradeable) -> bool:
        """Check whether this very item is in the inventory.

        Raises:
            ContractViolationError: If item is None.
        """
        require(item is not None, "item must not be None", argument="item")
        return item in self.inventory

    def can_afford(self, amount: int) -> bool:
        """Check whether the wizard has at least ``amount`` Knuts."""
        check_amount(amount)
        return self.money >= amount

    def has_capacity(self, weight: int) -> bool:
        """Check whether ``weight`` more grams fit into the inventory.

        Args:
            weight: Additional weight; must not be negative.

        Returns:
            True if the current weight plus ``weight`` stays within the
            carrying capacity.
        """
        check_amount(weight, "weight")
        return self.inventory_weight + weight <= self.carrying_capacity

    def pay(self, amount: int) -> bool:
        """Deduct ``amount`` Knuts.

        Args:
            amount: Money to pay; must not be negative.

        Returns:
            False without deducting anything if the wizard is dead or
            cannot afford the amount.
        """
        check_amount(amount)
        if self.is_dead() or self.money < amount:
            return False
        self.money -= amount
        return True

    def earn(self, amount: int) -> bool:
        """Add ``amount`` Knuts; dead wizards earn nothing."""
        check_amount(amount)
        if self.is_dead():
            return False
        self.money += amount
        return True

    def add_to_inventory(self, item: Tradeable) -> bool:
        """Store ``item`` if it is not carried yet and fits.

        Dead wizards still receive items.

        Returns:
            True if the item was added.

        Raises:
            ContractViolationError: If item is None.
        """
        require(item is not None, "item must not be None", argument="item")
        if item in self.inventory or not self.has_capacity(item.weight):
            return False
        self.inventory.append(item)
        return True

    def remove_from_inventory(self, item: Tradeable) -> bool:
        """Remove ``item``; False if it was not carried."""
        require(item is not None, "item must not be None", argument="item")
        if item not in self.inventory:
            return False
        self.inventory.remove(item)
        return True

    def can_steal(self) -> bool:
        """Only living wizards steal."""
        return not self.is_dead()

    def steal(self, thief: Trader) -> bool:
        """Let ``thief`` take one random item from this wizard.

        The item leaves this inventory before the thief tries to store it.
        If it does not fit into the thief's inventory it is gone for good.

        Returns:
            True if the thief now carries the stolen item.

        Raises:
            ContractViolationError: If thief is None.
        """
        require(thief is not None, "thief must not be None", argument="thief")
        if not thief.can_steal() or not self.inventory:
            return False
        item = self.inventory.pop(self.selector.pick_index(len(self.inventory)))
        if thief.add_to_inventory(item):
            logger.info("Item stolen", item=label(item), victim=self.name, thief=label(thief))
            return True
        logger.debug("Stolen item vanished", item=label(item), victim=self.name, thief=label(thief))
        return False

    def is_lootable(self) -> bool:
        """Only dead wizards can be looted."""
        return self.is_dead()

    def can_loot(self) -> bool:
        """Only living wizards loot."""
        return not self.is_dead()

    def loot(self, looter: Trader) -> bool:
        """Let ``looter`` take everything this wizard carries.

        Items that do not fit into the looter's inventory vanish, and this
        wizard's inventory is empty afterwards either way.

        Returns:
            True if at least one item reached the looter.

        Raises:
            ContractViolationError: If looter is None.
        """
        require(looter is not None, "looter must not be None", argument="looter")
        if not looter.can_loot() or not self.is_lootable():
            return False
        looted = 0
        for item in self.inventory:
            if looter.add_to_inventory(item):
                looted += 1
            else:
                logger.debug("Looted item vanished", item=label(item), victim=self.name)
        lost = len(self.inventory) - looted
        self.inventory.clear()
        logger.info("Wizard looted", victim=self.name, looter=label(looter), looted=looted, lost=lost)
        return looted > 0

    # -------------------------------------------------------------------------
    # MagicEffectRealization
    # -------------------------------------------------------------------------

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` HP, never dropping below 0."""
        super().take_damage(amount)
        self.hp = max(0, self.hp - amount)

    def take_damage_percent(self, percentage: int) -> None:
        """Lose ``percentage`` percent of the basic HP.

        Args:
            percentage: Share of ``basic_hp`` in ``[0, 100]``.
        """
        super().take_damage_percent(percentage)
        self.take_damage(percent_of(self.basic_hp, percentage))

    def weaken_magic(self, amount: int) -> None:
        """Lose ``amount`` MP, never dropping below 0."""
        super().weaken_magic(amount)
        self.mp = max(0, self.mp - amount)

    def weaken_magic_percent(self, percentage: int) -> None:
        """Lose ``percentage`` percent of the basic MP."""
        super().weaken_magic_percent(percentage)
        self.weaken_magic(percent_of(self.basic_mp, percentage))

    def heal(self, amount: int) -> None:
        """Gain ``amount`` HP.

        There is no ceiling: HP may exceed ``basic_hp``, and healing a
        dead wizard brings it back to life.
        """
        super().heal(amount)
        self.hp += amount

    def heal_percent(self, percentage: int) -> None:
        """Gain ``percentage`` percent of the basic HP."""
        super().heal_percent(percentage)
        self.heal(percent_of(self.basic_hp, percentage))

    def enforce_magic(self, amount: int) -> None:
        """Gain ``amount`` MP, without a ceiling."""
        super().enforce_magic(amount)
        self.mp += amount

    def enforce_magic_percent(self, percentage: int) -> None:
        """Gain ``percentage`` percent of the basic MP."""
        super().enforce_magic_percent(percentage)
        self.enforce_magic(percent_of(self.basic_mp, percentage))

    def is_protected(self, spell: Spell) -> bool:
        """Check whether ``spell`` is one of the attacks this wizard is protected from.

        Args:
            spell: The spell about to be applied.

        Returns:
            True only for an attacking spell held in ``protected_from``,
            compared by identity.
        """
        super().is_protected(spell)
        return isinstance(spell, AttackingSpell) and spell in self.protected_from

    def set_protection(self, attacks: Iterable[AttackingSpell]) -> None:
        """Add protection against each attacking spell; others are ignored."""
        super().set_protection(attacks)
        for attack in list(attacks):
            if isinstance(attack, AttackingSpell) and attack not in self.protected_from:
                self.protected_from.append(attack)

    def remove_protection(self, attacks: Iterable[AttackingSpell]) -> None:
        """Drop protection against each spell in ``attacks``."""
        super().remove_protection(attacks)
        for attack in list(attacks):
            if attack in self.protected_from:
                self.protected_from.remove(attack)

    def __str__(self) -> str:
        spells = ", ".join(str(spell) for spell in self.known_spells)
        items = ", ".join(str(item) for item in self.inventory)
        return (
            f"[{self.name}({self.level}): {self.hp}/{self.basic_hp} {self.mp}/{self.basic_mp}; "
            f"{currency(self.money)}; knows [{spells}]; carries [{items}]]"
        )


__all__ = ["Wizard"]
