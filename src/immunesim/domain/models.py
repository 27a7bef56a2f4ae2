"""Dataclasses describing combat groups and the battle roster.

The roster is an arena: every group gets a :data:`GroupID` when the roster is
built and keeps it for the whole battle, so attack plans stay valid while the
engine re-sorts groups and removes the dead.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import NewType

from .enums import Faction
from .rules_config import DEFAULT_RULES, BattleRules

GroupID = NewType("GroupID", int)

AttackPlan = dict[GroupID, GroupID]


@dataclass(slots=True)
class CombatGroup:
    """A group of identical units fighting as one entity."""

    faction: Faction
    unit_count: int
    hit_points_per_unit: int
    attack_damage: int
    attack_type: str
    initiative: int
    weaknesses: frozenset[str] = field(default_factory=frozenset)
    immunities: frozenset[str] = field(default_factory=frozenset)

    def effective_power(self, boost: int = 0, *, rules: BattleRules = DEFAULT_RULES.battle) -> int:
        """Units times attack damage, with ``boost`` added for the boosted faction."""

        if self.faction == rules.boosted_faction:
            return self.unit_count * (self.attack_damage + boost)
        return self.unit_count * self.attack_damage

    def damage_to(
        self,
        target: CombatGroup,
        boost: int = 0,
        *,
        rules: BattleRules = DEFAULT_RULES.battle,
    ) -> int:
        """Damage this group would deal to ``target`` right now.

        Immunity is checked before weakness, so a tag present in both sets
        still yields zero damage.
        """

        if self.attack_type in target.immunities:
            return 0
        power = self.effective_power(boost, rules=rules)
        if self.attack_type in target.weaknesses:
            return power * rules.weakness_multiplier
        return power

    def apply_damage(self, amount: int) -> int:
        """Remove every unit ``amount`` can fully kill and return the losses."""

        killed = min(max(amount, 0) // self.hit_points_per_unit, self.unit_count)
        self.unit_count -= killed
        return killed

    @property
    def is_alive(self) -> bool:
        return self.unit_count > 0


@dataclass(slots=True)
class Roster:
    """Every living group of a battle, keyed by stable identifier."""

    groups: dict[GroupID, CombatGroup] = field(default_factory=dict)

    @classmethod
    def from_groups(cls, groups: Iterable[CombatGroup]) -> Roster:
        """Assign identifiers in iteration order, skipping already-dead groups."""

        roster = cls()
        for index, group in enumerate(groups):
            if group.is_alive:
                roster.groups[GroupID(index)] = group
        return roster

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[GroupID]:
        return iter(self.groups)

    def __contains__(self, group_id: object) -> bool:
        return group_id in self.groups

    def get(self, group_id: GroupID) -> CombatGroup | None:
        return self.groups.get(group_id)

    def items(self) -> list[tuple[GroupID, CombatGroup]]:
        return list(self.groups.items())

    def of_faction(self, faction: Faction) -> list[tuple[GroupID, CombatGroup]]:
        return [(gid, group) for gid, group in self.groups.items() if group.faction == faction]

    def living_count(self, faction: Faction) -> int:
        """Number of groups still fielded by ``faction``."""

        return sum(1 for group in self.groups.values() if group.faction == faction)

    def units_by_faction(self) -> dict[Faction, int]:
        totals = {faction: 0 for faction in Faction}
        for group in self.groups.values():
            totals[group.faction] += group.unit_count
        return totals

    def total_units(self) -> int:
        return sum(group.unit_count for group in self.groups.values())

    def remove_dead(self) -> list[GroupID]:
        """Drop groups without units and return their identifiers."""

        dead = [gid for gid, group in self.groups.items() if not group.is_alive]
        for gid in dead:
            del self.groups[gid]
        return dead

    def copy(self) -> Roster:
        return copy.deepcopy(self)
