"""Pydantic V2 models for the wizard economy.

Submodules:
    enums: MagicLevel and EffectStat.
    base: EconomyEntity, the identity-compared pydantic base.
    capabilities: MagicSource, MagicEffectRealization, Tradeable, Trader.
    spells: Spell, AttackingSpell, HealingSpell.
    items: MagicItem, ManaPotion, HealthPotion, Scroll, Concoction.
    wizard: Wizard, the actor implementing every capability.

Example:
    >>> from wizard_economy.models import AttackingSpell, EffectStat, MagicLevel, Wizard
    >>> confringo = AttackingSpell(
    ...     name="Confringo", mana_cost=3, level_needed=MagicLevel.ADEPT,
    ...     stat=EffectStat.HP, amount=20,
    ... )
"""

from __future__ import annotations

from wizard_economy.models.base import EconomyEntity
from wizard_economy.models.capabilities import (
    MagicEffectRealization,
    MagicSource,
    Tradeable,
    Trader,
    percent_of,
)
from wizard_economy.models.enums import EffectStat, MagicLevel
from wizard_economy.models.items import (
    Concoction,
    HealthPotion,
    MagicItem,
    ManaPotion,
    Potion,
    Scroll,
)
from wizard_economy.models.spells import (
    AttackingSpell,
    HealingSpell,
    Spell,
    StatSpell,
)
from wizard_economy.models.wizard import Wizard


__all__ = [
    # Enums
    "MagicLevel",
    "EffectStat",
    # Base
    "EconomyEntity",
    # Capabilities
    "MagicSource",
    "MagicEffectRealization",
    "Tradeable",
    "Trader",
    "percent_of",
    # Spells
    "Spell",
    "StatSpell",
    "AttackingSpell",
    "HealingSpell",
    # Items
    "MagicItem",
    "Potion",
    "ManaPotion",
    "HealthPotion",
    "Scroll",
    "Concoction",
    # Actors
    "Wizard",
]
