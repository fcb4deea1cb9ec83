"""Application-wide constants for the wizard economy.

This module defines the fixed vocabulary and bounds used by the models
and their display formatting.
"""

from __future__ import annotations

# =============================================================================
# Effect Bounds
# =============================================================================

MIN_PERCENTAGE = 0
"""Smallest accepted percentage for percentage-based effects."""

MAX_PERCENTAGE = 100
"""Largest accepted percentage for percentage-based effects."""

# =============================================================================
# Display Vocabulary
# =============================================================================

CURRENCY_SINGULAR = "Knut"
"""Currency name used when an amount equals one."""

CURRENCY_PLURAL = "Knuts"
"""Currency name used for every other amount."""

WEIGHT_UNIT = "g"
"""Unit appended to item weights."""

TIER_GLYPH = "*"
"""Glyph repeated once per magic level rank."""

USAGE_WORDS = ("use", "uses")
"""Singular and plural words for the remaining usages of an item."""

POTION_USAGE_WORDS = ("gulp", "gulps")
"""Singular and plural words for the remaining usages of a potion."""


def currency(amount: int) -> str:
    """Format an amount of money with the matching currency word.

    Args:
        amount: Amount of money.

    Returns:
        e.g. '1 Knut' or '72 Knuts'.
    """
    return f"{amount} {CURRENCY_SINGULAR if amount == 1 else CURRENCY_PLURAL}"


__all__ = [
    "MIN_PERCENTAGE",
    "MAX_PERCENTAGE",
    "CURRENCY_SINGULAR",
    "CURRENCY_PLURAL",
    "WEIGHT_UNIT",
    "TIER_GLYPH",
    "USAGE_WORDS",
    "POTION_USAGE_WORDS",
    "currency",
]
