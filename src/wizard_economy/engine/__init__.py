"""Engine services consumed by the models.

Modules:
    selection: Uniform random index selection for random spells, items and thefts.
"""

from __future__ import annotations

from wizard_economy.engine.selection import (
    IndexSelector,
    RandomSelector,
    default_selector,
)


__all__ = [
    "IndexSelector",
    "RandomSelector",
    "default_selector",
]
