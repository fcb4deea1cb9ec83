"""Wizard Economy - a polymorphic effect-and-trade engine.

Wizards hold HP, MP and a magic level, carry weight-limited inventories of
magic items, cast spells, and trade, steal and loot from one another.
Every state change goes through four capabilities (MagicSource,
MagicEffectRealization, Tradeable, Trader) implemented by spells, items
and wizards.

Example:
    >>> from wizard_economy import AttackingSpell, EffectStat, MagicLevel, Wizard
    >>> confringo = AttackingSpell(
    ...     name="Confringo", mana_cost=3, level_needed=MagicLevel.ADEPT,
    ...     stat=EffectStat.HP, amount=20,
    ... )
    >>> caster = Wizard(
    ...     name="Ignatius", level=MagicLevel.STUDENT, basic_hp=10, hp=10,
    ...     basic_mp=200, mp=50, carrying_capacity=10, known_spells=[confringo],
    ... )
    >>> victim = Wizard(
    ...     name="Dude", level=MagicLevel.NOOB, basic_hp=10, hp=10,
    ...     basic_mp=50, mp=0, carrying_capacity=10,
    ... )
    >>> caster.cast_spell(confringo, victim)
    True
    >>> victim.hp, caster.mp
    (0, 47)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models for spells, items and wizards.
    engine: Random index selection used by the random actions.
"""

from __future__ import annotations

# Core
from wizard_economy.core.config import Settings, get_settings
from wizard_economy.core.exceptions import (
    ContractViolationError,
    InvalidTradeError,
    WizardEconomyError,
)
from wizard_economy.core.logging import configure_logging, get_logger

# Engine
from wizard_economy.engine.selection import IndexSelector, RandomSelector

# Models
from wizard_economy.models import (
    AttackingSpell,
    Concoction,
    EffectStat,
    HealingSpell,
    HealthPotion,
    MagicEffectRealization,
    MagicItem,
    MagicLevel,
    MagicSource,
    ManaPotion,
    Potion,
    Scroll,
    Spell,
    Tradeable,
    Trader,
    Wizard,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "WizardEconomyError",
    "ContractViolationError",
    "InvalidTradeError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "IndexSelector",
    "RandomSelector",
    # Models
    "MagicLevel",
    "EffectStat",
    "MagicSource",
    "MagicEffectRealization",
    "Tradeable",
    "Trader",
    "Spell",
    "AttackingSpell",
    "HealingSpell",
    "MagicItem",
    "Potion",
    "ManaPotion",
    "HealthPotion",
    "Scroll",
    "Concoction",
    "Wizard",
]
