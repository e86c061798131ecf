"""DynamoDB table definitions.

Used by the seed script to provision local tables and by the test suite.
Production tables are provisioned by infrastructure code with the same
key schema.
"""

from typing import Any

ROOMS_TABLE = "rooms"
BOOKINGS_TABLE = "bookings"
REVIEWS_TABLE = "reviews"

USER_EMAIL_INDEX = "user_email-index"
ROOM_ID_INDEX = "room_id-index"


def table_definitions(prefix: str) -> list[dict[str, Any]]:
    """CreateTable requests for every table under the given prefix."""
    return [
        {
            "TableName": f"{prefix}-{ROOMS_TABLE}",
            "KeySchema": [{"AttributeName": "room_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "room_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": f"{prefix}-{BOOKINGS_TABLE}",
            "KeySchema": [{"AttributeName": "booking_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "booking_id", "AttributeType": "S"},
                {"AttributeName": "user_email", "AttributeType": "S"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": USER_EMAIL_INDEX,
                    "KeySchema": [{"AttributeName": "user_email", "KeyType": "HASH"}],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": f"{prefix}-{REVIEWS_TABLE}",
            "KeySchema": [{"AttributeName": "review_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "review_id", "AttributeType": "S"},
                {"AttributeName": "room_id", "AttributeType": "S"},
                {"AttributeName": "created_at", "AttributeType": "S"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": ROOM_ID_INDEX,
                    "KeySchema": [
                        {"AttributeName": "room_id", "KeyType": "HASH"},
                        {"AttributeName": "created_at", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]


def create_tables(client: Any, prefix: str) -> list[str]:
    """Create all tables that do not exist yet.

    Args:
        client: Low-level boto3 DynamoDB client
        prefix: Table name prefix

    Returns:
        Names of the tables that were created
    """
    existing = set(client.list_tables().get("TableNames", []))
    created = []
    for definition in table_definitions(prefix):
        if definition["TableName"] in existing:
            continue
        client.create_table(**definition)
        created.append(definition["TableName"])

    waiter = client.get_waiter("table_exists")
    for name in created:
        waiter.wait(TableName=name)
    return created
