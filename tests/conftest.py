"""Pytest configuration and fixtures for Dream Stay backend tests.

This module provides reusable fixtures for testing:
- DynamoDB mocking with moto (tables created from the real definitions)
- Sample rooms
- Services wired around the mocked storage handle
- A FastAPI TestClient and token helpers
"""

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("AWS_REGION", "eu-west-1")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

from dreamstay.config import Settings  # noqa: E402
from dreamstay.models import Room  # noqa: E402
from dreamstay.services import (  # noqa: E402
    AuthorizationGate,
    AvailabilityCoordinator,
    BookingStore,
    DynamoDBService,
    ReviewStore,
    RoomStore,
)
from dreamstay.services.tables import create_tables  # noqa: E402

TEST_PREFIX = "test-dreamstay"
TEST_SECRET = "test-secret-for-tokens"

GUEST_EMAIL = "guest@example.com"
OTHER_EMAIL = "other@example.com"


# === DynamoDB Fixtures ===


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"


@pytest.fixture
def db(aws_credentials: None) -> Generator[DynamoDBService, None, None]:
    """Connected DynamoDBService against moto with all tables created."""
    with mock_aws():
        service = DynamoDBService(TEST_PREFIX, region="eu-west-1").connect()
        create_tables(service.client, TEST_PREFIX)
        yield service
        service.close()


# === Sample Data Fixtures ===


def make_room(room_id: str, price: int, **overrides: Any) -> Room:
    """Build a Room with sensible defaults."""
    fields: dict[str, Any] = {
        "room_id": room_id,
        "title": f"Room {room_id}",
        "description": "A quiet room",
        "price": price,
        "location": "Lisbon",
        "images": [f"https://images.example.com/{room_id}.jpg"],
        "amenities": ["wifi"],
        "max_guests": 2,
    }
    fields.update(overrides)
    return Room(**fields)


@pytest.fixture
def sample_rooms() -> list[Room]:
    """Four rooms at prices 40, 100, 150 and 200."""
    return [
        make_room("room-101", 100),
        make_room("room-102", 150),
        make_room("room-103", 40),
        make_room("room-104", 200),
    ]


# === Service Fixtures ===


@pytest.fixture
def room_store(db: DynamoDBService) -> RoomStore:
    return RoomStore(db)


@pytest.fixture
def seeded_rooms(room_store: RoomStore, sample_rooms: list[Room]) -> list[Room]:
    """Store the sample rooms in the mocked rooms table."""
    for room in sample_rooms:
        room_store.put_room(room)
    return sample_rooms


@pytest.fixture
def booking_store(db: DynamoDBService) -> BookingStore:
    return BookingStore(db)


@pytest.fixture
def coordinator(
    db: DynamoDBService, room_store: RoomStore, booking_store: BookingStore
) -> AvailabilityCoordinator:
    return AvailabilityCoordinator(db, room_store, booking_store)


@pytest.fixture
def review_store(db: DynamoDBService, room_store: RoomStore) -> ReviewStore:
    return ReviewStore(db, room_store)


@pytest.fixture
def gate() -> AuthorizationGate:
    return AuthorizationGate(TEST_SECRET, ttl_seconds=3600)


# === API Fixtures ===


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        table_prefix=TEST_PREFIX,
        token_secret=TEST_SECRET,
    )


@pytest.fixture
def client(
    settings: Settings, db: DynamoDBService, seeded_rooms: list[Room]
) -> Generator[TestClient, None, None]:
    """TestClient for an app built around the mocked storage handle."""
    from dreamstay.api.main import create_app

    app = create_app(settings=settings, db=db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login(client: TestClient) -> Callable[[str], None]:
    """Sign the client in as an email via POST /jwt."""

    def _login(email: str = GUEST_EMAIL) -> None:
        response = client.post("/jwt", json={"email": email})
        assert response.status_code == 200

    return _login


@pytest.fixture
def auth_headers(gate: AuthorizationGate) -> Callable[[str], dict[str, str]]:
    """Bearer headers for an email, signed with the test secret."""

    def _headers(email: str = GUEST_EMAIL) -> dict[str, str]:
        return {"Authorization": f"Bearer {gate.issue_token(email).token}"}

    return _headers
