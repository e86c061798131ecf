"""Unit tests for ReviewStore."""

import pytest

from dreamstay.models import BookingError, ErrorCode, Room
from dreamstay.services import ReviewStore


class TestAddReview:
    def test_add_review(self, review_store: ReviewStore, seeded_rooms: list[Room]) -> None:
        review = review_store.add_review(
            "room-101", "guest@example.com", 5, "Great stay", reviewer_name="Ana"
        )

        assert review.rating == 5
        assert review.reviewer_name == "Ana"
        assert review_store.list_reviews("room-101") == [review]

    def test_review_for_missing_room(
        self, review_store: ReviewStore, seeded_rooms: list[Room]
    ) -> None:
        with pytest.raises(BookingError) as exc_info:
            review_store.add_review("room-999", "guest@example.com", 4)

        assert exc_info.value.code == ErrorCode.ROOM_NOT_FOUND
        assert review_store.list_reviews() == []

    def test_rating_out_of_range_is_rejected(
        self, review_store: ReviewStore, seeded_rooms: list[Room]
    ) -> None:
        with pytest.raises(ValueError):
            review_store.add_review("room-101", "guest@example.com", 6)


class TestListReviews:
    def test_lists_newest_first(self, review_store: ReviewStore, seeded_rooms: list[Room]) -> None:
        first = review_store.add_review("room-101", "a@example.com", 3, "ok")
        second = review_store.add_review("room-101", "b@example.com", 5, "great")

        reviews = review_store.list_reviews("room-101")

        assert [r.review_id for r in reviews] == [second.review_id, first.review_id]

    def test_filters_by_room(self, review_store: ReviewStore, seeded_rooms: list[Room]) -> None:
        review_store.add_review("room-101", "a@example.com", 3)
        other = review_store.add_review("room-102", "a@example.com", 4)

        assert review_store.list_reviews("room-102") == [other]
        assert len(review_store.list_reviews()) == 2

    def test_room_without_reviews(
        self, review_store: ReviewStore, seeded_rooms: list[Room]
    ) -> None:
        assert review_store.list_reviews("room-104") == []

