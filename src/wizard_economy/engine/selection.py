"""Uniform index selection for the random wizard actions.

Wizards never call the random module directly. Picking a random spell,
item or theft victim goes through an IndexSelector so that a seeded or
scripted selector makes those actions reproducible in tests and replays.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from wizard_economy.core.config import get_settings
from wizard_economy.core.exceptions import require
from wizard_economy.core.logging import get_logger


logger = get_logger(__name__)


class IndexSelector(ABC):
    """Chooses an index uniformly from ``[0, size)``."""

    @abstractmethod
    def pick_index(self, size: int) -> int:
        """Pick an index.

        Args:
            size: Number of candidates; must be positive.

        Returns:
            An index in ``[0, size)``.
        """


class RandomSelector(IndexSelector):
    """IndexSelector backed by its own ``random.Random`` instance.

    Example:
        >>> selector = RandomSelector(seed=42)
        >>> 0 <= selector.pick_index(3) < 3
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the selector.

        Args:
            seed: Optional random seed for reproducible choices.
        """
        self._seed = seed
        self._rng = random.Random(seed)
        logger.debug("RandomSelector initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def pick_index(self, size: int) -> int:
        require(size > 0, "Cannot pick from an empty collection", argument="size", value=size)
        return self._rng.randrange(size)


def default_selector() -> IndexSelector:
    """Build the selector a wizard gets when none is supplied.

    Returns:
        A RandomSelector seeded from ``Settings.random_seed``.
    """
    return RandomSelector(seed=get_settings().random_seed)


__all__ = [
    "IndexSelector",
    "RandomSelector",
    "default_selector",
]
