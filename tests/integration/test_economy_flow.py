"""Integration tests for the wizard economy.

Tests complete scenarios from a market trade through a duel to looting.
"""

from __future__ import annotations

from typing import Any

from wizard_economy.engine.selection import RandomSelector
from wizard_economy.models import (
    AttackingSpell,
    Concoction,
    EffectStat,
    HealingSpell,
    HealthPotion,
    MagicLevel,
    ManaPotion,
    Scroll,
    Wizard,
)


def build_wizard(name: str, **overrides: Any) -> Wizard:
    fields: dict[str, Any] = {
        "name": name,
        "level": MagicLevel.ADEPT,
        "basic_hp": 40,
        "hp": 40,
        "basic_mp": 100,
        "mp": 100,
        "money": 50,
        "carrying_capacity": 20,
        "selector": RandomSelector(seed=11),
    }
    fields.update(overrides)
    return Wizard(**fields)


class TestEconomyFlow:
    """Test complete economy scenarios."""

    def test_trade_duel_and_loot(self) -> None:
        """Buy supplies, fight until one wizard dies, then loot the body."""
        confringo = AttackingSpell(
            name="Confringo", mana_cost=10, level_needed=MagicLevel.ADEPT, stat=EffectStat.HP, amount=15
        )
        draught = HealthPotion(name="Draught", usages=1, price=8, weight=3, amount=10)
        tonic = ManaPotion(name="Tonic", usages=2, price=4, weight=2, amount=20)

        merchant = build_wizard("Merchant", inventory=[draught, tonic])
        duelist = build_wizard("Duelist", known_spells=[confringo])
        rival = build_wizard("Rival", hp=20)

        # Market: the duelist stocks up
        assert merchant.sell_item(draught, duelist) is True
        assert merchant.sell_item(tonic, duelist) is True
        assert duelist.money == 38
        assert merchant.money == 62
        assert duelist.inventory_weight == 5

        # Duel: 20 HP takes two hits
        assert duelist.cast_spell(confringo, rival) is True
        assert rival.hp == 5
        assert duelist.cast_spell(confringo, rival) is True
        assert rival.is_dead()
        assert duelist.mp == 80

        # Dead wizards do not act
        assert rival.cast_random_spell(duelist) is False
        assert duelist.hp == 40

        # Loot whatever the rival had on them
        rival.add_to_inventory(Scroll(name="Scroll", usages=1, price=3, weight=1, spell=confringo))
        assert rival.loot(duelist) is True
        assert rival.inventory == []
        assert len(duelist.inventory) == 3

    def test_protection_and_brew(self) -> None:
        """A protected wizard shrugs off an attack but not a concoction."""
        sectumsempra = AttackingSpell(
            name="Sectumsempra",
            mana_cost=20,
            level_needed=MagicLevel.ADEPT,
            stat=EffectStat.HP,
            percentage=True,
            amount=50,
        )
        attacker = build_wizard("Attacker", known_spells=[sectumsempra])
        defender = build_wizard("Defender")
        defender.set_protection([sectumsempra])

        attacker.cast_spell(sectumsempra, defender)
        assert defender.hp == 40
        assert attacker.mp == 100

        brew = Concoction(
            name="Poison Brew", usages=1, price=5, weight=1, health=-10, mana=-30, spells=[sectumsempra]
        )
        attacker.add_to_inventory(brew)
        assert attacker.use_item(brew, defender) is True

        # Direct effects apply, the bound spell is still blocked
        assert defender.hp == 30
        assert defender.mp == 70
        assert brew.usages == 0

    def test_random_actions_keep_invariants(self) -> None:
        """Random casting and theft never break capacity or clamp rules."""
        spells = [
            AttackingSpell(
                name="Stupefy", mana_cost=5, level_needed=MagicLevel.NOOB, stat=EffectStat.HP, amount=7
            ),
            AttackingSpell(
                name="Drain",
                mana_cost=5,
                level_needed=MagicLevel.NOOB,
                stat=EffectStat.MP,
                percentage=True,
                amount=30,
            ),
            HealingSpell(
                name="Episkey", mana_cost=5, level_needed=MagicLevel.NOOB, stat=EffectStat.HP, amount=3
            ),
        ]
        items = [
            HealthPotion(name=f"Potion {index}", usages=3, price=2, weight=4, amount=2)
            for index in range(5)
        ]
        first = build_wizard("First", known_spells=spells, inventory=items, selector=RandomSelector(seed=1))
        second = build_wizard("Second", known_spells=spells, carrying_capacity=8, selector=RandomSelector(seed=2))

        for _ in range(30):
            first.cast_random_spell(second)
            second.cast_random_spell(first)
            first.steal(second)
            first.use_random_item(first)

        for wizard in (first, second):
            assert wizard.hp >= 0
            assert wizard.mp >= 0
            assert wizard.inventory_weight <= wizard.carrying_capacity
        # Items only ever leave or vanish, never duplicate
        assert len(first.inventory) + len(second.inventory) <= 5
        assert not set(first.inventory) & set(second.inventory)
