"""Declarative rule configuration for the battle engine."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Faction


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Damage and boost parameters."""

    boosted_faction: Faction = Faction.IMMUNE_SYSTEM
    weakness_multiplier: int = 2


@dataclass(frozen=True, slots=True)
class BoostSearchRules:
    """Bounds for the minimal winning boost search."""

    initial_ceiling: int = 1
    ceiling_limit: int = 1_000_000


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container."""

    battle: BattleRules = BattleRules()
    boost_search: BoostSearchRules = BoostSearchRules()


DEFAULT_RULES = RulesConfig()
