"""Enumerations used across the immunesim domain."""

from __future__ import annotations

from enum import StrEnum


class Faction(StrEnum):
    """The two opposing sides of a battle."""

    IMMUNE_SYSTEM = "immune_system"
    INFECTION = "infection"

    @property
    def enemy(self) -> Faction:
        """Return the opposing faction."""

        if self is Faction.IMMUNE_SYSTEM:
            return Faction.INFECTION
        return Faction.IMMUNE_SYSTEM

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class BattleOutcome(StrEnum):
    """How a battle ended."""

    VICTORY = "victory"
    STALEMATE = "stalemate"
