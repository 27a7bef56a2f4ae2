"""Battle resolution rules.

A round has two phases. During target selection every group, strongest
first, claims at most one enemy group; during attack execution the groups
strike in initiative order and casualties are removed as soon as they fall.
Rounds repeat until one faction has no groups left, or until a full round
passes without a single unit dying.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .enums import BattleOutcome, Faction
from .models import AttackPlan, CombatGroup, GroupID, Roster
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RoundSummary:
    """What happened in one round."""

    number: int
    plan: AttackPlan
    units_killed: int
    groups_destroyed: list[GroupID] = field(default_factory=list)


@dataclass(slots=True)
class BattleResult:
    """Summary of a finished battle."""

    outcome: BattleOutcome
    winner: Faction | None
    rounds: int
    roster: Roster
    boost: int = 0
    history: list[RoundSummary] = field(default_factory=list)

    @property
    def units_by_faction(self) -> dict[Faction, int]:
        return self.roster.units_by_faction()

    @property
    def total_units(self) -> int:
        """Surviving units across every group on both sides."""

        return self.roster.total_units()

    def units_for(self, faction: Faction) -> int:
        return self.units_by_faction[faction]


def selection_order(
    roster: Roster,
    boost: int = 0,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> list[GroupID]:
    """Order in which groups choose targets: effective power, then initiative."""

    def _key(item: tuple[GroupID, CombatGroup]) -> tuple[int, int]:
        _, group = item
        return (-group.effective_power(boost, rules=rules.battle), -group.initiative)

    return [gid for gid, _ in sorted(roster.items(), key=_key)]


def execution_order(roster: Roster) -> list[GroupID]:
    """Order in which groups attack: initiative, highest first."""

    return [gid for gid, _ in sorted(roster.items(), key=lambda item: -item[1].initiative)]


def plan_attack(
    roster: Roster,
    boost: int = 0,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> AttackPlan:
    """Run the target-selection phase and return attacker -> target.

    The roster is not modified, so calling this twice in a row yields the
    same plan. When several candidates tie on damage, effective power and
    initiative, the one listed first in the roster wins.
    """

    battle_rules = rules.battle
    plan: AttackPlan = {}
    claimed: set[GroupID] = set()

    for attacker_id in selection_order(roster, boost, rules=rules):
        attacker = roster.groups[attacker_id]
        candidates = [
            (gid, group)
            for gid, group in roster.of_faction(attacker.faction.enemy)
            if gid not in claimed
        ]
        if not candidates:
            continue

        target_id, target = max(
            candidates,
            key=lambda item: (
                attacker.damage_to(item[1], boost, rules=battle_rules),
                item[1].effective_power(boost, rules=battle_rules),
                item[1].initiative,
            ),
        )
        if attacker.damage_to(target, boost, rules=battle_rules) == 0:
            continue

        plan[attacker_id] = target_id
        claimed.add(target_id)

    return plan


def attack(
    roster: Roster,
    plan: AttackPlan,
    boost: int = 0,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    """Run the attack-execution phase and return the number of units killed.

    The initiative order is fixed when the phase starts. Attackers or
    targets destroyed earlier in the phase are skipped.
    """

    killed = 0
    for attacker_id in execution_order(roster):
        target_id = plan.get(attacker_id)
        if target_id is None:
            continue
        attacker = roster.get(attacker_id)
        if attacker is None:
            continue
        target = roster.get(target_id)
        if target is None:
            continue

        damage = attacker.damage_to(target, boost, rules=rules.battle)
        killed += target.apply_damage(damage)
        roster.remove_dead()

    return killed


def run_round(
    roster: Roster,
    number: int,
    boost: int = 0,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> RoundSummary:
    """Plan and execute a single round."""

    before = set(roster)
    plan = plan_attack(roster, boost, rules=rules)
    killed = attack(roster, plan, boost, rules=rules)
    destroyed = sorted(before - set(roster))
    logger.debug(
        "round %d: %d attacks planned, %d units killed, %d groups destroyed",
        number,
        len(plan),
        killed,
        len(destroyed),
    )
    return RoundSummary(number=number, plan=plan, units_killed=killed, groups_destroyed=destroyed)


def run_fight(
    roster: Roster,
    boost: int = 0,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> BattleResult:
    """Fight until one faction is wiped out or no unit dies in a round.

    The roster is mutated in place and returned inside the result.
    """

    history: list[RoundSummary] = []
    while True:
        immune_groups = roster.living_count(Faction.IMMUNE_SYSTEM)
        infection_groups = roster.living_count(Faction.INFECTION)
        if immune_groups == 0 or infection_groups == 0:
            break

        summary = run_round(roster, len(history) + 1, boost, rules=rules)
        history.append(summary)
        if summary.units_killed == 0:
            totals = roster.units_by_faction()
            logger.warning(
                "stalemate after %d rounds: immune system %d units, infection %d units",
                len(history),
                totals[Faction.IMMUNE_SYSTEM],
                totals[Faction.INFECTION],
            )
            return BattleResult(
                outcome=BattleOutcome.STALEMATE,
                winner=None,
                rounds=len(history),
                roster=roster,
                boost=boost,
                history=history,
            )

    if immune_groups == 0 and infection_groups == 0:
        outcome, winner = BattleOutcome.STALEMATE, None
    else:
        outcome = BattleOutcome.VICTORY
        winner = Faction.IMMUNE_SYSTEM if immune_groups else Faction.INFECTION

    logger.info(
        "battle over after %d rounds: %s with %d units remaining",
        len(history),
        winner.label if winner else "no winner",
        roster.total_units(),
    )
    return BattleResult(
        outcome=outcome,
        winner=winner,
        rounds=len(history),
        roster=roster,
        boost=boost,
        history=history,
    )


def simulate(
    roster: Roster,
    boost: int = 0,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> BattleResult:
    """Fight on a copy of ``roster`` and leave the original untouched."""

    return run_fight(roster.copy(), boost, rules=rules)
