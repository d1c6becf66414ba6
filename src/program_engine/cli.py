"""Command-line entry point.

Usage:
    python -m program_engine generate profile.json
    python -m program_engine generate profile.json --start 2026-10-19 --seed 7 -o plan.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from program_engine.config import configure_logging, make_rng
from program_engine.engine import PlanEngine
from program_engine.exceptions import InvalidProfileError
from program_engine.models.profile import Profile
from program_engine.serialization import plan_to_json_string

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="program_engine", description="Generate a 12-session workout program",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a plan from a profile JSON file")
    gen.add_argument("profile", help="Path to a profile JSON file")
    gen.add_argument("--start", type=date.fromisoformat, default=None,
                     help="First candidate session date (YYYY-MM-DD, default today)")
    gen.add_argument("--seed", type=int, default=None, help="Random seed")
    gen.add_argument("-o", "--output", default=None,
                     help="Write plan JSON here instead of stdout")
    gen.add_argument("--log-level", default=None, type=str.upper,
                     choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def _generate(args: argparse.Namespace) -> int:
    try:
        with open(args.profile) as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read profile %s: %s", args.profile, exc)
        return 2

    try:
        profile = Profile.from_dict(raw)
    except InvalidProfileError as exc:
        logger.error("Invalid profile: %s", exc)
        return 2

    engine = PlanEngine(rng=make_rng(args.seed))
    plan = engine.generate(profile, start=args.start)
    text = plan_to_json_string(plan)

    if args.output:
        with open(args.output, "w") as f:
            f.write(text)
        logger.info("Wrote plan %s to %s", plan.id, args.output)
    else:
        sys.stdout.write(text + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)
    if args.command == "generate":
        return _generate(args)
    return 1
