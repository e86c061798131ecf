#!/usr/bin/env python3
"""Create tables and seed sample rooms for local development.

Usage:
    python scripts/seed_data.py --env dev
    python scripts/seed_data.py --env dev --endpoint-url http://localhost:8000
    python scripts/seed_data.py --env dev --tables-only
    python scripts/seed_data.py --env dev --force
"""

import argparse
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dreamstay.config import table_prefix  # noqa: E402
from dreamstay.models import Room  # noqa: E402
from dreamstay.services import DynamoDBService, RoomStore  # noqa: E402
from dreamstay.services.tables import create_tables  # noqa: E402

SAMPLE_ROOMS = [
    Room(
        room_id="room-101",
        title="Seaside Studio",
        description="Bright studio two minutes from the beach.",
        price=100,
        location="Lisbon",
        images=["https://images.example.com/rooms/101.jpg"],
        amenities=["wifi", "air conditioning", "kitchenette"],
        max_guests=2,
    ),
    Room(
        room_id="room-102",
        title="Old Town Loft",
        description="Loft with exposed beams above a quiet courtyard.",
        price=150,
        location="Porto",
        images=["https://images.example.com/rooms/102.jpg"],
        amenities=["wifi", "washer"],
        max_guests=3,
    ),
    Room(
        room_id="room-103",
        title="Garden Cabin",
        description="Small wooden cabin with a private garden.",
        price=40,
        location="Sintra",
        images=["https://images.example.com/rooms/103.jpg"],
        amenities=["parking", "fireplace"],
        max_guests=2,
    ),
    Room(
        room_id="room-104",
        title="Penthouse Suite",
        description="Top floor suite with a roof terrace.",
        price=200,
        location="Lisbon",
        images=["https://images.example.com/rooms/104.jpg"],
        amenities=["wifi", "terrace", "elevator", "air conditioning"],
        max_guests=4,
    ),
]


def seed_rooms(db: DynamoDBService, force: bool = False) -> int:
    """Write the sample rooms.

    Existing rooms are skipped unless force is set, so re-seeding a live
    table never frees a room a booking holds.

    Returns:
        Number of rooms written
    """
    rooms = RoomStore(db)
    written = 0
    for room in SAMPLE_ROOMS:
        if rooms.put_room(room, overwrite=force):
            written += 1
            print(f"  Seeded {room.room_id} ({room.title}, {room.price})")
        else:
            print(f"  Skipped {room.room_id} (already exists)")
    return written


def main(argv: list[str] | None = None) -> int:
    """Run the seed script."""
    parser = argparse.ArgumentParser(description="Seed development database with sample rooms")
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
        "--tables-only",
        action="store_true",
        help="Create missing tables without seeding rooms",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing rooms, resetting their availability",
    )

    args = parser.parse_args(argv)

    if args.env == "production":
        confirm = input("WARNING: You are about to modify PRODUCTION data. Type 'yes' to continue: ")
        if confirm.lower() != "yes":
            print("Aborted.")
            return 1

    prefix = args.table_prefix or table_prefix(args.env)
    print(f"\nSeeding {prefix} (region: {args.region})\n")

    with DynamoDBService(prefix, region=args.region, endpoint_url=args.endpoint_url) as db:
        created = create_tables(db.client, prefix)
        for name in created:
            print(f"  Created table {name}")

        if args.tables_only:
            print("\nTables ready.")
            return 0

        count = seed_rooms(db, force=args.force)

    print(f"\nSeeded {count} rooms.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
