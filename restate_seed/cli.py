"""Wipe and reseed the listing collections with sample data.

Usage:
    python -m scripts.seed --force
    restate-seed --force --env-file .env.local
"""

import argparse
import asyncio
import sys
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from restate_seed.config import DEFAULT_ENV_FILE, Settings, load_settings, missing_env_vars
from restate_seed.database import AppwriteDatabases, DatabaseError
from restate_seed.listings.service import seed

CONFIRM_PROMPT = "⚠️  DELETE and reseed database? (y/N): "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Delete all agents, reviews, galleries and properties, then reseed them"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Required: acknowledge that existing documents will be deleted",
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Env file to read settings from (default: {DEFAULT_ENV_FILE})",
    )
    return parser


def confirm(prompt: Callable[[str], str]) -> bool:
    try:
        answer = prompt(CONFIRM_PROMPT)
    except EOFError:
        return False
    return answer.strip().lower() == "y"


async def run_seed(settings: Settings) -> int:
    async with AppwriteDatabases(settings) as db:
        try:
            summary = await seed(db, settings)
        except (DatabaseError, httpx.HTTPError) as e:
            print(f"❌ Error seeding data: {e}", file=sys.stderr)
            return 1
    print(
        f"  Agents: {summary.agents}, Reviews: {summary.reviews}, "
        f"Galleries: {summary.galleries}, Properties: {summary.properties}"
    )
    return 0


def main(argv: Optional[list[str]] = None, prompt: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.env_file)
    except ValidationError as e:
        missing = missing_env_vars(e)
        for name in missing:
            print(f"❌ Missing required env variable: {name}", file=sys.stderr)
        if not missing:
            print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    if not args.force:
        print("⚠️  Run with --force to reseed:\n")
        print("   python -m scripts.seed --force\n")
        return 1

    if not confirm(prompt):
        print("❌ Seeding aborted.")
        return 0

    return asyncio.run(run_seed(settings))


if __name__ == "__main__":
    sys.exit(main())
