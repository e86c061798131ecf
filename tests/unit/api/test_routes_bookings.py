"""Tests for the /bookings endpoints."""

from collections.abc import Callable
from typing import Any

from fastapi.testclient import TestClient

GUEST = "guest@example.com"
OTHER = "other@example.com"


def _book(client: TestClient, room_id: str = "room-101", **extra: Any) -> Any:
    return client.post(
        "/bookings",
        json={"room_id": room_id, "booking_date": "2025-07-15", **extra},
    )


class TestCreateBooking:
    def test_requires_token(self, client: TestClient) -> None:
        response = _book(client)

        assert response.status_code == 401
        assert client.get("/rooms/room-101").json()["available"] is True

    def test_creates_booking(self, client: TestClient, login: Callable) -> None:
        login()

        response = _book(client)

        assert response.status_code == 200
        body = response.json()
        assert body["room_id"] == "room-101"
        assert body["user_email"] == GUEST
        assert body["booking_date"] == "2025-07-15"
        assert body["price"] == 100
        assert body["booking_id"]

    def test_bearer_header_is_accepted(
        self, client: TestClient, auth_headers: Callable
    ) -> None:
        response = client.post(
            "/bookings",
            json={"room_id": "room-102", "booking_date": "2025-07-15"},
            headers=auth_headers(GUEST),
        )
        assert response.status_code == 200

    def test_matching_user_email_is_allowed(self, client: TestClient, login: Callable) -> None:
        login()
        response = _book(client, user_email=GUEST)
        assert response.status_code == 200

    def test_mismatched_user_email_is_forbidden(
        self, client: TestClient, login: Callable
    ) -> None:
        login()

        response = _book(client, user_email=OTHER)

        assert response.status_code == 403
        assert response.json()["error_code"] == "ERR_AUTH_004"
        assert client.get("/rooms/room-101").json()["available"] is True

    def test_booked_room_conflicts(self, client: TestClient, login: Callable) -> None:
        login()
        _book(client)

        login(OTHER)
        response = _book(client)

        assert response.status_code == 409
        assert response.json()["error_code"] == "ERR_002"

    def test_accepts_camel_case_payload(self, client: TestClient, login: Callable) -> None:
        login()

        response = client.post(
            "/bookings", json={"roomId": "room-103", "email": GUEST, "date": "2024-01-01"}
        )

        assert response.status_code == 200
        assert response.json()["room_id"] == "room-103"
        assert response.json()["booking_date"] == "2024-01-01"

    def test_missing_room(self, client: TestClient, login: Callable) -> None:
        login()
        response = _book(client, room_id="room-999")
        assert response.status_code == 404

    def test_invalid_date(self, client: TestClient, login: Callable) -> None:
        login()
        response = client.post(
            "/bookings", json={"room_id": "room-101", "booking_date": "next tuesday"}
        )
        assert response.status_code == 422


class TestListBookings:
    def test_lists_own_bookings(self, client: TestClient, login: Callable) -> None:
        login()
        _book(client, room_id="room-101")
        _book(client, room_id="room-102")

        response = client.get(f"/bookings/{GUEST}")

        assert response.status_code == 200
        assert sorted(b["room_id"] for b in response.json()) == ["room-101", "room-102"]

    def test_other_users_bookings_forbidden(self, client: TestClient, login: Callable) -> None:
        login()
        response = client.get(f"/bookings/{OTHER}")
        assert response.status_code == 403

    def test_requires_token(self, client: TestClient) -> None:
        assert client.get(f"/bookings/{GUEST}").status_code == 401


class TestRescheduleBooking:
    def test_reschedule(self, client: TestClient, login: Callable) -> None:
        login()
        booking_id = _book(client).json()["booking_id"]

        response = client.patch(f"/bookings/{booking_id}", json={"booking_date": "2025-08-01"})

        assert response.status_code == 200
        assert response.json()["booking_date"] == "2025-08-01"
        assert response.json()["updated_at"] is not None

    def test_non_owner_forbidden(self, client: TestClient, login: Callable) -> None:
        login()
        booking_id = _book(client).json()["booking_id"]

        login(OTHER)
        response = client.patch(f"/bookings/{booking_id}", json={"booking_date": "2025-08-01"})

        assert response.status_code == 403
        assert response.json()["error_code"] == "ERR_004"

    def test_missing_booking(self, client: TestClient, login: Callable) -> None:
        login()
        response = client.patch("/bookings/missing", json={"booking_date": "2025-08-01"})
        assert response.status_code == 404


class TestCancelBooking:
    def test_cancel_releases_room(self, client: TestClient, login: Callable) -> None:
        login()
        booking_id = _book(client).json()["booking_id"]

        response = client.delete(f"/bookings/{booking_id}")

        assert response.status_code == 200
        assert response.json() == {
            "booking_id": booking_id,
            "room_id": "room-101",
            "deleted": True,
            "room_released": True,
        }
        assert client.get("/rooms/room-101").json()["available"] is True

    def test_non_owner_forbidden(self, client: TestClient, login: Callable) -> None:
        login()
        booking_id = _book(client).json()["booking_id"]

        login(OTHER)
        response = client.delete(f"/bookings/{booking_id}")

        assert response.status_code == 403
        assert client.get("/rooms/room-101").json()["available"] is False

    def test_second_cancel_is_not_found(self, client: TestClient, login: Callable) -> None:
        login()
        booking_id = _book(client).json()["booking_id"]
        client.delete(f"/bookings/{booking_id}")

        response = client.delete(f"/bookings/{booking_id}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "ERR_003"
