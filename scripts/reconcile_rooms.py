#!/usr/bin/env python3
"""Release rooms left unavailable by a cancelled booking.

A cancel whose room release failed leaves the room unavailable with no live
booking. This script finds such rooms and makes them available again. Rooms
made unavailable by a manual override are left alone.

Usage:
    python scripts/reconcile_rooms.py --env dev
    python scripts/reconcile_rooms.py --env dev --room-id room-101
"""

import argparse
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dreamstay.config import table_prefix  # noqa: E402
from dreamstay.models import BookingError  # noqa: E402
from dreamstay.services import (  # noqa: E402
    AvailabilityCoordinator,
    BookingStore,
    DynamoDBService,
    RoomStore,
)
from dreamstay.utils.logging import configure_logging  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Run the reconcile script."""
    parser = argparse.ArgumentParser(description="Release rooms held by deleted bookings")
    parser.add_argument(
        "--env",
        choices=["dev", "staging", "production"],
        default="dev",
        help="Target environment (default: dev)",
    )
    parser.add_argument(
        "--region",
        default=os.environ.get("AWS_REGION", "eu-west-1"),
        help="AWS region (default: eu-west-1 or AWS_REGION env var)",
    )
    parser.add_argument(
        "--endpoint-url",
        default=os.environ.get("DYNAMODB_ENDPOINT_URL"),
        help="DynamoDB endpoint override, e.g. DynamoDB Local",
    )
    parser.add_argument(
        "--table-prefix",
        help="Table name prefix (default: DYNAMODB_TABLE_PREFIX or dreamstay-{env})",
    )
    parser.add_argument(
        "--room-id",
        help="Only reconcile this room",
    )

    args = parser.parse_args(argv)
    configure_logging()

    prefix = args.table_prefix or table_prefix(args.env)
    print(f"\nReconciling rooms in {prefix} (region: {args.region})\n")

    with DynamoDBService(prefix, region=args.region, endpoint_url=args.endpoint_url) as db:
        rooms = RoomStore(db)
        coordinator = AvailabilityCoordinator(db, rooms, BookingStore(db))

        if args.room_id:
            try:
                released = [args.room_id] if coordinator.reconcile_room(args.room_id) else []
            except BookingError as e:
                print(f"  {args.room_id}: {e.message}")
                return 1
        else:
            released = coordinator.reconcile_all()

    for room_id in released:
        print(f"  Released {room_id}")
    print(f"\n{len(released)} room(s) released.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
