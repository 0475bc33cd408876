"""TT Playthrough command line entry point."""

# TT Playthrough
# Copyright (C) 2025  TT Playthrough developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ttplaythrough.constants import DEFAULT_GAMES_TOTAL
from ttplaythrough.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
    TtPlaythroughException,
)
from ttplaythrough.models import PlaythroughConfig, Rule
from ttplaythrough.testing import DriveMode, RPGConfig, RandomPlaythroughGenerator
from ttplaythrough.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def parse_roster(value: str) -> List[int]:
    """Parse a roster argument like '0,1,2'.

    Raises:
        argparse.ArgumentTypeError: If format is invalid
    """
    try:
        roster = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid roster '{value}'. Expected comma separated integers like '0,1,2'"
        )
    if len(roster) < 2:
        raise argparse.ArgumentTypeError(
            f"Invalid roster '{value}'. At least two players are needed"
        )
    return roster


def load_configuration(config_file: Optional[str]) -> Dict[str, Any]:
    """Load configuration from JSON file.

    Args:
        config_file: Path to configuration file

    Returns:
        Configuration dictionary, empty when no file is given

    Raises:
        MissingConfigurationException: If the file does not exist
        InvalidConfigurationException: If the file is not a JSON object
    """
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        raise MissingConfigurationException(
            f"Configuration file not found: {config_file}"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(
            f"Failed to parse configuration {config_file}: {e}"
        ) from e
    if not isinstance(config, dict):
        raise InvalidConfigurationException(
            f"Configuration {config_file} must hold a JSON object"
        )
    logger.info("Loaded configuration from: %s", config_file)
    return config


def build_playthrough_config(args: argparse.Namespace) -> PlaythroughConfig:
    """Merge the configuration file with command line overrides."""
    data = load_configuration(args.config)
    if args.roster is not None:
        data["roster"] = args.roster
    if args.window is not None:
        data["fatigue_window"] = args.window
    if args.allow_rule_4:
        data["allow_rule_4"] = True
    if args.lenient_eligibility:
        data["lenient_eligibility"] = True
    if args.seed is not None:
        data["seed"] = args.seed
    return PlaythroughConfig.from_dict(data)


def run_playthrough(args: argparse.Namespace) -> int:
    """Run a playthrough based on CLI arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = build_playthrough_config(args)
    rpg_config = RPGConfig(
        roster=config.roster,
        fatigue_window=config.fatigue_window,
        enabled_rules=config.enabled_rules,
        lenient_eligibility=config.lenient_eligibility,
        num_games=args.games,
        mode=DriveMode(args.command),
        seed=config.seed,
        validate=args.validate,
    )
    logger.info(
        "Starting %s playthrough: roster %s, window %s, rules %s",
        args.command,
        list(config.roster),
        config.fatigue_window,
        [int(r) for r in sorted(config.enabled_rules)],
    )

    generator = RandomPlaythroughGenerator(rpg_config)
    summary = generator.run()

    print(generator.scheduler.format_matches())
    print()
    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"attempted: {summary.games_attempted}")
        print(f"played:    {summary.games_played}")
        for rule in sorted(Rule):
            if rule in summary.rejections:
                print(f"rejected by {rule.display_name}: {summary.rejections[rule]}")
        if summary.stopped_by:
            print(f"stopped by: {summary.stopped_by}")
        if summary.validation is not None:
            print(f"validation: {summary.validation.summary}")

    if summary.validation is not None and summary.validation.violations:
        return 2
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="tt-playthrough",
        description="Generate fair table matchups from a fixed roster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Feed 100000 randomly sampled matchups to the rules
  tt-playthrough random

  # Let the scheduler pick 20 matches for four players
  tt-playthrough auto --games 20 --roster 0,1,2,3

  # Reproducible run without the fixed-side rule, audited afterwards
  tt-playthrough random --seed 7 --allow-rule-4 --validate

  # Use configuration file
  tt-playthrough auto --config playthrough.json
        """,
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="JSON file with playthrough configuration")
    common.add_argument(
        "--games",
        type=int,
        default=DEFAULT_GAMES_TOTAL,
        help=f"Number of matches to request (default: {DEFAULT_GAMES_TOTAL})",
    )
    common.add_argument(
        "--roster",
        type=parse_roster,
        help="Comma separated players (default: 0,1,2)",
    )
    common.add_argument(
        "--window", type=int, help="Fatigue window in matches (default: 2)"
    )
    common.add_argument(
        "--allow-rule-4",
        action="store_true",
        help="Allow the same two players to meet again on the same sides",
    )
    common.add_argument(
        "--lenient-eligibility",
        action="store_true",
        help="Treat players exactly at the fatigue cap as eligible in auto mode",
    )
    common.add_argument("--seed", type=int, help="Random seed for reproducibility")
    common.add_argument(
        "--validate",
        action="store_true",
        help="Audit the finished playthrough against every rule",
    )
    common.add_argument(
        "--json", action="store_true", help="Print the summary as JSON"
    )
    common.add_argument(
        "--verbose", "-v", action="store_true", help="Log every rule rejection"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        DriveMode.RANDOM.value,
        parents=[common],
        help="Play uniformly sampled matchups when the rules allow them",
    )
    subparsers.add_parser(
        DriveMode.AUTO.value,
        parents=[common],
        help="Let the scheduler select every match",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return run_playthrough(args)
    except KeyboardInterrupt:
        logger.info("Playthrough interrupted by user")
        return 130
    except TtPlaythroughException as e:
        logger.error("Playthrough failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
