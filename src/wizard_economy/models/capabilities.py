"""Capability interfaces shared by wizards and magic items.

The economy is built from four capabilities:

- MagicSource: can supply mana for a spell, gated by a magic level.
- MagicEffectRealization: can receive HP/MP changes and hold protection
  against attacking spells.
- Tradeable: has a price and a weight, can be used on a target, and can be
  given or sold from one Trader to another.
- Trader: owns money and a weight-limited inventory, and can be stolen
  from or looted.

The concrete methods here validate their arguments and provide the
behaviour of a passive participant (an item). Wizards override them and
call ``super()`` first so the argument contract is checked in one place.
The give and purchase protocols are implemented once on Tradeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

from wizard_economy.core.constants import MAX_PERCENTAGE, MIN_PERCENTAGE
from wizard_economy.core.exceptions import InvalidTradeError, require
from wizard_economy.core.logging import get_logger


if TYPE_CHECKING:
    from wizard_economy.models.enums import MagicLevel
    from wizard_economy.models.spells import AttackingSpell, Spell


logger = get_logger(__name__)


def percent_of(basic: int, percentage: int) -> int:
    """Compute ``percentage`` percent of ``basic``, truncated to an int.

    The calculation is done in floating point and truncated only at the
    end, so ``percent_of(15, 50) == 7``.

    Args:
        basic: The base value (basic HP, basic MP, remaining usages).
        percentage: Percentage in ``[0, 100]``.

    Returns:
        The truncated share of ``basic``.
    """
    return int(basic * (percentage / 100.0))


def check_amount(amount: int, argument: str = "amount") -> None:
    """Reject a negative absolute amount."""
    require(amount >= 0, f"{argument} must not be negative", argument=argument, value=amount)


def check_percentage(percentage: int) -> None:
    """Reject a percentage outside the accepted bounds."""
    require(
        MIN_PERCENTAGE <= percentage <= MAX_PERCENTAGE,
        f"percentage must be between {MIN_PERCENTAGE} and {MAX_PERCENTAGE}",
        argument="percentage",
        value=percentage,
    )


def label(participant: object) -> str:
    """Short name of a participant for log events."""
    return getattr(participant, "name", type(participant).__name__)


# =============================================================================
# Magic Source
# =============================================================================


class MagicSource(ABC):
    """Something that can pay the mana cost of a spell."""

    def provide_mana(self, level_needed: MagicLevel, amount: int) -> bool:
        """Supply ``amount`` mana for an action requiring ``level_needed``.

        The default implementation always succeeds; items that cast spells
        are their own, inexhaustible source.

        Args:
            level_needed: Minimum magic level needed for the action.
            amount: Mana needed for the action.

        Returns:
            True if the mana was provided.

        Raises:
            ContractViolationError: If level_needed is None or amount is negative.
        """
        require(level_needed is not None, "level_needed must not be None", argument="level_needed")
        check_amount(amount)
        return True


# =============================================================================
# Magic Effect Realization
# =============================================================================


class MagicEffectRealization(ABC):
    """Something magic effects can be applied to.

    Absolute amounts must be non-negative and percentages must lie in
    ``[0, 100]``. Every default implementation checks its argument and
    otherwise leaves the target untouched.
    """

    def take_damage(self, amount: int) -> None:
        """Reduce HP by ``amount``."""
        check_amount(amount)

    def take_damage_percent(self, percentage: int) -> None:
        """Reduce HP by ``percentage`` percent of the basic HP.

        Items interpret this as degradation of their remaining usages.
        """
        check_percentage(percentage)

    def weaken_magic(self, amount: int) -> None:
        """Reduce MP by ``amount``."""
        check_amount(amount)

    def weaken_magic_percent(self, percentage: int) -> None:
        """Reduce MP by ``percentage`` percent of the basic MP."""
        check_percentage(percentage)

    def heal(self, amount: int) -> None:
        """Increase HP by ``amount``."""
        check_amount(amount)

    def heal_percent(self, percentage: int) -> None:
        """Increase HP by ``percentage`` percent of the basic HP."""
        check_percentage(percentage)

    def enforce_magic(self, amount: int) -> None:
        """Increase MP by ``amount``."""
        check_amount(amount)

    def enforce_magic_percent(self, percentage: int) -> None:
        """Increase MP by ``percentage`` percent of the basic MP."""
        check_percentage(percentage)

    def is_protected(self, spell: Spell) -> bool:
        """Check whether this target is protected against ``spell``.

        Only attacking spells can be protected against.

        Args:
            spell: The spell about to be applied.

        Returns:
            False by default.
        """
        require(spell is not None, "spell must not be None", argument="spell")
        return False

    def set_protection(self, attacks: Iterable[AttackingSpell]) -> None:
        """Add protection against every spell in ``attacks``."""
        require(attacks is not None, "attacks must not be None", argument="attacks")

    def remove_protection(self, attacks: Iterable[AttackingSpell]) -> None:
        """Remove protection against every spell in ``attacks``."""
        require(attacks is not None, "attacks must not be None", argument="attacks")


# =============================================================================
# Trading
# =============================================================================


class Tradeable(ABC):
    """Something that can be stored in an inventory and traded.

    Implementations expose integer ``price`` and ``weight`` attributes.
    """

    @abstractmethod
    def use_on(self, target: MagicEffectRealization) -> None:
        """Use this object on ``target``.

        Raises:
            ContractViolationError: If target is None.
        """

    def _transfer(self, source: Trader, destination: Trader) -> bool:
        # No rollback: if the add fails after a successful removal the
        # object is in neither inventory.
        if not source.remove_from_inventory(self):
            return False
        if destination.add_to_inventory(self):
            return True
        logger.debug(
            "Transfer lost item",
            item=label(self),
            source=label(source),
            destination=label(destination),
        )
        return False

    def give(self, giver: Trader, taker: Trader) -> bool:
        """Give this object away for free.

        Args:
            giver: The trader giving the object away.
            taker: The trader receiving the object.

        Returns:
            True if the object ended up in the taker's inventory. False if
            the giver does not own it, the taker has no room for it, or the
            transfer failed half way.

        Raises:
            InvalidTradeError: If giver or taker is None or they are the same trader.
        """
        _check_parties(giver, "giver", taker, "taker")
        if not giver.possesses(self) or not taker.has_capacity(self.weight):
            return False
        moved = self._transfer(giver, taker)
        if moved:
            logger.info("Item given", item=label(self), giver=label(giver), taker=label(taker))
        return moved

    def purchase(self, seller: Trader, buyer: Trader) -> bool:
        """Sell this object from ``seller`` to ``buyer`` at its price.

        Money changes hands before the object is transferred. A transfer
        that fails afterwards does not refund the buyer.

        Args:
            seller: The trader selling the object.
            buyer: The trader buying the object.

        Returns:
            True if the transfer succeeded. False if the seller does not own
            the object, the buyer has no room for it or cannot afford it, or
            the transfer failed after payment.

        Raises:
            InvalidTradeError: If seller or buyer is None or they are the same trader.
        """
        _check_parties(seller, "seller", buyer, "buyer")
        if (
            not seller.possesses(self)
            or not buyer.has_capacity(self.weight)
            or not buyer.can_afford(self.price)
        ):
            return False
        seller.earn(self.price)
        buyer.pay(self.price)
        moved = self._transfer(seller, buyer)
        if moved:
            logger.info(
                "Item purchased",
                item=label(self),
                seller=label(seller),
                buyer=label(buyer),
                price=self.price,
            )
        return moved


def _check_parties(first: Trader | None, first_role: str, second: Trader | None, second_role: str) -> None:
    if first is None:
        raise InvalidTradeError(f"{first_role} must not be None", role=first_role)
    if second is None:
        raise InvalidTradeError(f"{second_role} must not be None", role=second_role)
    if first is second:
        raise InvalidTradeError(f"{first_role} and {second_role} must differ", role=second_role)


class Trader(ABC):
    """Something that owns money and a weight-limited inventory."""

    @abstractmethod
    def possesses(self, item: Tradeable) -> bool:
        """Return True if ``item`` is in the inventory."""

    @abstractmethod
    def can_afford(self, amount: int) -> bool:
        """Return True if there is at least ``amount`` money."""

    @abstractmethod
    def has_capacity(self, weight: int) -> bool:
        """Return True if ``weight`` more fits into the inventory."""

    @abstractmethod
    def pay(self, amount: int) -> bool:
        """Deduct ``amount`` money; False if that is not possible."""

    @abstractmethod
    def earn(self, amount: int) -> bool:
        """Receive ``amount`` money; False if that is not possible."""

    @abstractmethod
    def add_to_inventory(self, item: Tradeable) -> bool:
        """Add ``item``; False if already present or it would not fit."""

    @abstractmethod
    def remove_from_inventory(self, item: Tradeable) -> bool:
        """Remove ``item``; False if it was not present."""

    @abstractmethod
    def can_steal(self) -> bool:
        """Return True if this trader is able to steal."""

    @abstractmethod
    def steal(self, thief: Trader) -> bool:
        """Let ``thief`` take one random item from this trader."""

    @abstractmethod
    def is_lootable(self) -> bool:
        """Return True if this trader's whole inventory may be seized."""

    @abstractmethod
    def can_loot(self) -> bool:
        """Return True if this trader is able to loot."""

    @abstractmethod
    def loot(self, looter: Trader) -> bool:
        """Let ``looter`` take everything this trader carries."""


__all__ = [
    "MagicSource",
    "MagicEffectRealization",
    "Tradeable",
    "Trader",
    "percent_of",
    "check_amount",
    "check_percentage",
]
