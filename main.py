"""Tracker - parcel tracking demo entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from tracker.config import Settings, load_settings
from tracker.errors import TrackerError
from tracker.monitor.logger import setup_logging
from tracker.persistence import Database, ParcelStore
from tracker.service import ParcelService

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tracker - parcel tracking demo"
    )

    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="Database path (default: from config)",
    )

    parser.add_argument(
        "--client",
        type=int,
        default=None,
        help="Client id for the demo parcels (default: from config)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config)",
    )

    return parser.parse_args()


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if args.db:
        settings.database.path = Path(args.db)

    if args.client is not None:
        settings.demo_client = args.client

    if args.log_level:
        settings.logging.level = args.log_level

    return settings


async def run_demo(service: ParcelService, client: int) -> None:
    """Walk a parcel through its lifecycle."""
    parcel = await service.register(client, "Pskov, d. Pushkina, ul. Kolotushkina, d. 5")

    for stored in await service.client_parcels(client):
        print(
            f"Parcel #{stored.number} to {stored.address} "
            f"registered {stored.created_at}, status {stored.status.value}"
        )

    await service.change_address(parcel.number, "Saratov, d. Verkhniye Zori, ul. Nizhnyaya, d. 3")
    await service.next_status(parcel.number)

    # Sent parcels cannot be deleted
    try:
        await service.delete(parcel.number)
    except TrackerError as e:
        print(f"Refused: {e}")

    fresh = await service.register(client, "Pskov, d. Pushkina, ul. Kolotushkina, d. 5")
    await service.delete(fresh.number)

    for stored in await service.client_parcels(client):
        print(f"Parcel #{stored.number}: {stored.status.value}, {stored.address}")


async def async_main(settings: Settings) -> int:
    """Async main entry point."""
    db = Database(settings.database.path)
    await db.connect()
    try:
        service = ParcelService(ParcelStore(db))
        await run_demo(service, settings.demo_client)
        return 0
    except Exception:
        logger.exception("Demo failed")
        return 1
    finally:
        await db.disconnect()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    settings = load_settings()
    settings = apply_args_to_settings(args, settings)

    setup_logging(
        settings.logging.log_dir,
        level=settings.logging.level,
        json_format=settings.logging.json_format,
    )

    print(f"Starting Tracker with database {settings.database.path}...")

    return asyncio.run(async_main(settings))


if __name__ == "__main__":
    sys.exit(main())
