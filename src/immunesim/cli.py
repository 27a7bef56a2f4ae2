"""Command line entrypoint for running battle scenarios."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from immunesim.config import Settings, get_settings
from immunesim.domain.battle import run_fight
from immunesim.domain.boost import BoostSearchError, find_minimal_boost
from immunesim.reporting import format_result, summarize
from immunesim.repository import JsonScenarioRepository

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="immunesim", description="Run immune system battles")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="Fight a scenario to the end")
    run.add_argument("scenario", help="Scenario slug or path to a JSON file")
    run.add_argument("--boost", type=int, default=None, help="Override the scenario boost")
    run.add_argument("--json", action="store_true", help="Print the result as JSON")

    boost = commands.add_parser("boost", help="Find the smallest boost that wins")
    boost.add_argument("scenario", help="Scenario slug or path to a JSON file")
    boost.add_argument("--json", action="store_true", help="Print the result as JSON")

    commands.add_parser("list", help="List available scenarios")
    return parser


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    repository = JsonScenarioRepository(settings.scenario_dir)

    if args.command == "list":
        for slug in repository.list_scenarios():
            print(slug)
        return 0

    try:
        scenario = repository.load(args.scenario)
    except (FileNotFoundError, ValidationError) as exc:
        logger.error("cannot load scenario %s: %s", args.scenario, exc)
        return 1

    rules = settings.rules()
    if args.command == "run":
        boost = args.boost if args.boost is not None else scenario.boost
        result = run_fight(scenario.build_roster(), boost, rules=rules)
    else:
        try:
            _, result = find_minimal_boost(scenario.build_roster(), rules=rules)
        except BoostSearchError as exc:
            logger.error("%s", exc)
            return 1

    if args.json:
        print(json.dumps(summarize(result), indent=2))
    else:
        if args.command == "boost":
            print(f"Minimal boost: {result.boost}")
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
