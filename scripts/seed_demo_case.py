#!/usr/bin/env python3
"""
Insert a demo incident record into the configured record store.

Usage:
    python scripts/seed_demo_case.py                    # Insert the built-in demo record
    python scripts/seed_demo_case.py --file case.json   # Insert a record from a JSON file
"""

import argparse
import asyncio
import sys
from pathlib import Path

from siren.config import configure_logging, get_logger, get_settings
from siren.core import SirenError
from siren.repositories import create_repository
from siren.services import IncidentBridgeService

DEMO_CASE = """
{
  "name": "Kushwanth",
  "department": "IT",
  "time": "2025-09-15T12:20:00",
  "priority": "HIGH",
  "location": "Bangalore",
  "summary": "Testing default JSON flow",
  "status": "OPEN"
}
"""


async def seed(payload: str) -> str:
    """Save one record through the bridge and return its id."""
    repository = create_repository(get_settings())
    try:
        record = await IncidentBridgeService(repository).ingest(payload)
    finally:
        await repository.close()
    return record.id or ""


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the SIREN record store")
    parser.add_argument("--file", type=Path, help="JSON file holding one incident record")
    args = parser.parse_args()

    configure_logging()
    logger = get_logger("scripts.seed")

    payload = args.file.read_text(encoding="utf-8") if args.file else DEMO_CASE

    try:
        record_id = asyncio.run(seed(payload))
    except SirenError as e:
        logger.error("Seeding failed", error=e.message)
        return 1

    logger.info("Demo incident record inserted", record_id=record_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
