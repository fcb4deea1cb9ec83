"""Base model for every entity of the wizard economy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EconomyEntity(BaseModel):
    """Base class for spells, items and wizards.

    Entities are compared by identity, not by field values. Two spells
    with the same name, cost and level are still different spells, and an
    item in an inventory is that very item rather than any item that
    looks like it.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


__all__ = ["EconomyEntity"]
