"""Command line entry point for the monitor seeder."""
from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from pydantic import ValidationError

from kuma_seeder.config import Settings, get_settings
from kuma_seeder.database import open_database
from kuma_seeder.schemas.summary import RunReport
from kuma_seeder.services.seed_runner import RunMode, run_seeder
from kuma_seeder.utils.exceptions import (
    ConfigurationError,
    DatabaseNotFoundError,
    SeedAbortedError,
    SeederException,
)
from kuma_seeder.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kuma-seed",
        description="Seed Uptime Kuma with monitors for the mock server endpoints.",
    )
    parser.add_argument(
        "-c",
        "--clear",
        action="store_true",
        help="delete monitors pointing at the mock server before seeding",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="same as --clear",
    )
    return parser


def load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


async def seed(settings: Settings, mode: RunMode) -> RunReport:
    """Open the database, run the seeder and release the database."""
    async with open_database(settings.database_path, echo=settings.log_level == "DEBUG") as session_factory:
        return await run_seeder(session_factory, settings, mode)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the seeder.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    mode = RunMode.from_flags(clear=args.clear, force=args.force)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        setup_logging()
        logger.error("seed_failed", step=exc.step, error=exc.reason)
        return 1

    setup_logging(settings.log_level, json_logs=settings.log_json)
    logger.info(
        "seeder_started",
        database=settings.database_path.name,
        base_url=settings.mock_server_base,
        mode=mode.value,
    )

    try:
        report = asyncio.run(seed(settings, mode))
    except DatabaseNotFoundError as exc:
        logger.error(
            "database_not_found",
            step=exc.step,
            path=str(exc.path),
            hint="Make sure Uptime Kuma has been started at least once.",
        )
        return 1
    except SeedAbortedError as exc:
        logger.error(
            "seed_aborted",
            step=exc.step,
            definition=exc.definition,
            inserted_before_failure=exc.inserted,
            error=exc.reason,
        )
        return 1
    except SeederException as exc:
        logger.error("seed_failed", step=exc.step, error=str(exc))
        return 1

    logger.info(
        "seed_complete",
        inserted=report.seed.inserted,
        skipped=report.seed.skipped,
        deleted=report.deleted,
        total_monitors=report.total_monitors,
        hint="Restart Uptime Kuma to see the changes.",
    )
    return 0
