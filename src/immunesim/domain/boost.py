"""Search for the smallest boost that lets the boosted faction win."""

from __future__ import annotations

import logging

from .battle import BattleResult, simulate
from .enums import BattleOutcome
from .models import Roster
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


class BoostSearchError(RuntimeError):
    """Raised when no boost below the ceiling produces a victory."""


def find_minimal_boost(
    roster: Roster,
    *,
    ceiling: int | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> tuple[int, BattleResult]:
    """Return the minimal winning boost and the battle it produces.

    Probes doubling boosts until the boosted faction wins, then bisects the
    last losing/winning pair. A stalemate counts as a loss. ``roster`` is
    never modified.

    Bisection assumes that once a boost wins, every larger boost wins too.
    If a roster breaks that assumption, the returned boost still wins and
    ``boost - 1`` still loses, but a smaller winning boost may exist.
    """

    faction = rules.battle.boosted_faction
    limit = ceiling if ceiling is not None else rules.boost_search.ceiling_limit

    def _winning(boost: int) -> BattleResult | None:
        result = simulate(roster, boost, rules=rules)
        won = result.outcome == BattleOutcome.VICTORY and result.winner == faction
        logger.debug("boost %d: %s", boost, "win" if won else "loss")
        return result if won else None

    best = _winning(0)
    if best is not None:
        return 0, best

    low = 0
    high = max(1, rules.boost_search.initial_ceiling)
    while True:
        high = min(high, limit)
        best = _winning(high)
        if best is not None:
            break
        if high >= limit:
            raise BoostSearchError(f"{faction.label} cannot win with any boost up to {limit}")
        low, high = high, high * 2

    while high - low > 1:
        middle = (low + high) // 2
        result = _winning(middle)
        if result is None:
            low = middle
        else:
            high, best = middle, result

    logger.info("minimal winning boost for %s is %d", faction.label, high)
    return high, best
