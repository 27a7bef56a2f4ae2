"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`immunesim` package without requiring an editable install in CI. It also
provides the classic two-versus-two battle as a fixture.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

SCENARIO_DIR = Path(__file__).resolve().parents[1] / "scenarios"


@pytest.fixture
def example_roster():
    from immunesim.domain.enums import Faction
    from immunesim.domain.models import CombatGroup, Roster

    return Roster.from_groups(
        [
            CombatGroup(
                faction=Faction.IMMUNE_SYSTEM,
                unit_count=17,
                hit_points_per_unit=5390,
                attack_damage=4507,
                attack_type="fire",
                initiative=2,
                weaknesses=frozenset({"radiation", "bludgeoning"}),
            ),
            CombatGroup(
                faction=Faction.IMMUNE_SYSTEM,
                unit_count=989,
                hit_points_per_unit=1274,
                attack_damage=25,
                attack_type="slashing",
                initiative=3,
                weaknesses=frozenset({"bludgeoning", "slashing"}),
                immunities=frozenset({"fire"}),
            ),
            CombatGroup(
                faction=Faction.INFECTION,
                unit_count=801,
                hit_points_per_unit=4706,
                attack_damage=116,
                attack_type="bludgeoning",
                initiative=1,
                weaknesses=frozenset({"radiation"}),
            ),
            CombatGroup(
                faction=Faction.INFECTION,
                unit_count=4485,
                hit_points_per_unit=2961,
                attack_damage=12,
                attack_type="slashing",
                initiative=4,
                weaknesses=frozenset({"fire", "cold"}),
                immunities=frozenset({"radiation"}),
            ),
        ]
    )


@pytest.fixture
def scenario_dir() -> Path:
    return SCENARIO_DIR
