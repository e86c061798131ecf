"""Tests for the /reviews endpoints."""

from collections.abc import Callable

from fastapi.testclient import TestClient


class TestPostReview:
    def test_requires_token(self, client: TestClient) -> None:
        response = client.post("/reviews", json={"room_id": "room-101", "rating": 5})
        assert response.status_code == 401

    def test_post_review_uses_caller_email(self, client: TestClient, login: Callable) -> None:
        login("reviewer@example.com")

        response = client.post(
            "/reviews",
            json={
                "room_id": "room-101",
                "rating": 4,
                "comment": "Quiet and clean",
                "reviewer_name": "Ana",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["user_email"] == "reviewer@example.com"
        assert body["rating"] == 4
        assert body["reviewer_name"] == "Ana"

    def test_rating_out_of_range(self, client: TestClient, login: Callable) -> None:
        login()
        response = client.post("/reviews", json={"room_id": "room-101", "rating": 0})
        assert response.status_code == 422

    def test_missing_room(self, client: TestClient, login: Callable) -> None:
        login()
        response = client.post("/reviews", json={"room_id": "room-999", "rating": 3})
        assert response.status_code == 404


class TestListReviews:
    def test_list_for_room_newest_first(self, client: TestClient, login: Callable) -> None:
        login()
        client.post("/reviews", json={"room_id": "room-101", "rating": 3, "comment": "first"})
        client.post("/reviews", json={"room_id": "room-101", "rating": 5, "comment": "second"})
        client.post("/reviews", json={"room_id": "room-102", "rating": 4, "comment": "elsewhere"})

        response = client.get("/reviews/room-101")

        assert response.status_code == 200
        assert [r["comment"] for r in response.json()] == ["second", "first"]

    def test_list_all_is_public(self, client: TestClient, login: Callable) -> None:
        login()
        client.post("/reviews", json={"room_id": "room-101", "rating": 3})
        client.post("/reviews", json={"room_id": "room-102", "rating": 4})
        client.get("/logout")

        response = client.get("/reviews")

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_room_without_reviews(self, client: TestClient) -> None:
        response = client.get("/reviews/room-104")
        assert response.json() == []
