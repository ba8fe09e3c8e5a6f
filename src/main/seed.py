"""
Backfill Entry Point - Main Layer

Regenerates the historical energy generation series of a solar unit:
``python -m src.main.seed --serial-number SU-0001``.
"""

import argparse
import asyncio
from datetime import datetime, timezone
from typing import List, Optional

from src.application.dtos.energy_dto import BackfillResultDTO
from src.main.config import AppSettings, get_settings
from src.main.container import init_container
from src.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)

DEFAULT_START = datetime(2025, 8, 1, 8, 0, tzinfo=timezone.utc)
DEFAULT_END = datetime(2025, 12, 13, 8, 0, tzinfo=timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 instant; naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid ISO-8601 timestamp: {value}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.main.seed",
        description="Backfill synthetic energy generation records for a solar unit.",
    )
    parser.add_argument(
        "--serial-number",
        default=settings.energy.serial_number,
        help="Solar unit serial number (default: %(default)s)",
    )
    parser.add_argument(
        "--start",
        type=parse_timestamp,
        default=DEFAULT_START,
        help="First record timestamp, ISO-8601 (default: 2025-08-01T08:00:00Z)",
    )
    parser.add_argument(
        "--end",
        type=parse_timestamp,
        default=DEFAULT_END,
        help="Last record timestamp, inclusive (default: 2025-12-13T08:00:00Z)",
    )
    parser.add_argument(
        "--interval-hours",
        type=int,
        default=settings.energy.interval_hours,
        help="Hours between records (default: %(default)s)",
    )
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Do not delete the unit's existing records first",
    )
    return parser


async def run_backfill(
    settings: AppSettings, args: argparse.Namespace
) -> BackfillResultDTO:
    container = init_container(settings)
    mongo_database = container.mongo_database()
    try:
        await mongo_database.create_indexes()
        use_case = container.backfill_energy_records_use_case()
        return await use_case.execute(
            serial_number=args.serial_number,
            start=args.start,
            end=args.end,
            interval_hours=args.interval_hours,
            clear_existing=not args.keep_existing,
        )
    finally:
        mongo_database.close()


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if args.interval_hours <= 0:
        parser.error("--interval-hours must be positive")
    if args.end < args.start:
        parser.error("--end must not be before --start")

    result = asyncio.run(run_backfill(settings, args))
    logger.info(
        "seed.completed",
        serial_number=result.serial_number,
        deleted=result.deleted,
        inserted=result.inserted,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
