"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the wizard economy test suite.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import pytest

from wizard_economy.engine.selection import IndexSelector


if TYPE_CHECKING:
    from collections.abc import Generator


class ScriptedSelector(IndexSelector):
    """IndexSelector that returns a fixed sequence of indices.

    Records every requested size so tests can assert what was offered.
    """

    def __init__(self, indices: Iterable[int] = ()) -> None:
        self._indices = list(indices)
        self.sizes: list[int] = []

    def pick_index(self, size: int) -> int:
        self.sizes.append(size)
        index = self._indices.pop(0) if self._indices else 0
        assert 0 <= index < size
        return index


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from wizard_economy.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "WIZARD_ECONOMY_DEBUG": "true",
        "WIZARD_ECONOMY_LOG_LEVEL": "DEBUG",
        "WIZARD_ECONOMY_RANDOM_SEED": "7",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def scripted_selector() -> type[ScriptedSelector]:
    """Provide the ScriptedSelector class for tests that script choices.

    Returns:
        The ScriptedSelector class.
    """
    return ScriptedSelector


# =============================================================================
# Spell Fixtures
# =============================================================================


@pytest.fixture
def confringo() -> Any:
    """An absolute HP attack: 20 damage for 3 mana at ADEPT."""
    from wizard_economy.models import AttackingSpell, EffectStat, MagicLevel

    return AttackingSpell(
        name="Confringo",
        mana_cost=3,
        level_needed=MagicLevel.ADEPT,
        stat=EffectStat.HP,
        amount=20,
    )


@pytest.fixture
def episkey() -> Any:
    """An absolute HP heal: +20 HP for 5 mana at NOOB."""
    from wizard_economy.models import EffectStat, HealingSpell, MagicLevel

    return HealingSpell(
        name="Episkey",
        mana_cost=5,
        level_needed=MagicLevel.NOOB,
        stat=EffectStat.HP,
        amount=20,
    )


# =============================================================================
# Item Fixtures
# =============================================================================


@pytest.fixture
def mana_potion() -> Any:
    """A ManaPotion restoring 3 MP, 10 gulps, price 1, weight 1."""
    from wizard_economy.models import ManaPotion

    return ManaPotion(name="Potion", usages=10, price=1, weight=1, amount=3)


@pytest.fixture
def heavy_potion() -> Any:
    """A HealthPotion of weight 5 and price 10."""
    from wizard_economy.models import HealthPotion

    return HealthPotion(name="Draught", usages=2, price=10, weight=5, amount=4)


# =============================================================================
# Wizard Fixtures
# =============================================================================


@pytest.fixture
def make_wizard() -> Any:
    """Factory building wizards with sensible defaults.

    Returns:
        Callable accepting Wizard field overrides.
    """
    from wizard_economy.models import MagicLevel, Wizard

    def factory(**overrides: Any) -> Wizard:
        fields: dict[str, Any] = {
            "name": "Dude",
            "level": MagicLevel.NOOB,
            "basic_hp": 10,
            "hp": 10,
            "basic_mp": 50,
            "mp": 0,
            "money": 100,
            "carrying_capacity": 100,
            "selector": ScriptedSelector(),
        }
        fields.update(overrides)
        return Wizard(**fields)

    return factory


@pytest.fixture
def caster(make_wizard: Any, confringo: Any) -> Any:
    """A STUDENT wizard with 10 HP and 50 MP who knows Confringo."""
    from wizard_economy.models import MagicLevel

    return make_wizard(
        name="Ignatius",
        level=MagicLevel.STUDENT,
        basic_mp=200,
        mp=50,
        known_spells=[confringo],
    )


@pytest.fixture
def victim(make_wizard: Any) -> Any:
    """A NOOB wizard with 10 HP and no mana."""
    return make_wizard(name="Victim")
