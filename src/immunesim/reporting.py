"""Render battle results for people and for machines."""

from __future__ import annotations

from immunesim.domain.battle import BattleResult
from immunesim.domain.enums import BattleOutcome, Faction


def summarize(result: BattleResult) -> dict[str, object]:
    """JSON-ready view of a battle result."""

    return {
        "outcome": str(result.outcome),
        "winner": str(result.winner) if result.winner else None,
        "rounds": result.rounds,
        "boost": result.boost,
        "groups": [
            {"id": int(gid), "faction": str(group.faction), "units": group.unit_count}
            for gid, group in result.roster.items()
        ],
        "units_by_faction": {
            str(faction): units for faction, units in result.units_by_faction.items()
        },
        "total_units": result.total_units,
    }


def format_result(result: BattleResult) -> str:
    """Multi-line description of the survivors and the outcome."""

    lines: list[str] = []
    for faction in Faction:
        lines.append(f"{faction.label}:")
        survivors = result.roster.of_faction(faction)
        if not survivors:
            lines.append("  No groups remain.")
        for gid, group in survivors:
            lines.append(f"  Group {int(gid)} contains {group.unit_count} units")

    totals = result.units_by_faction
    if result.outcome == BattleOutcome.STALEMATE:
        lines.append(
            f"Stalemate after {result.rounds} rounds: "
            f"{Faction.IMMUNE_SYSTEM.label} {totals[Faction.IMMUNE_SYSTEM]} units, "
            f"{Faction.INFECTION.label} {totals[Faction.INFECTION]} units"
        )
    elif result.winner is not None:
        lines.append(
            f"{result.winner.label} wins with {result.total_units} units "
            f"after {result.rounds} rounds"
        )
    return "\n".join(lines)
