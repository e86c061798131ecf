"""Review store: append-only reviews keyed by room."""

import datetime as dt
import uuid
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import Key

from dreamstay.models import BookingError, ErrorCode, Review
from dreamstay.services.tables import REVIEWS_TABLE, ROOM_ID_INDEX

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService
    from .rooms import RoomStore


class ReviewStore:
    """Service for creating and listing reviews.

    Reviews are independent of bookings: any signed-in user may review any
    existing room.
    """

    TABLE = REVIEWS_TABLE

    def __init__(self, db: "DynamoDBService", rooms: "RoomStore") -> None:
        self.db = db
        self.rooms = rooms

    def add_review(
        self,
        room_id: str,
        user_email: str,
        rating: int,
        comment: str = "",
        reviewer_name: str | None = None,
    ) -> Review:
        """Store a new review.

        Raises:
            BookingError: ROOM_NOT_FOUND if the room does not exist
        """
        if self.rooms.get_room(room_id) is None:
            raise BookingError(
                code=ErrorCode.ROOM_NOT_FOUND,
                details={"room_id": room_id},
            )

        review = Review(
            review_id=str(uuid.uuid4()),
            room_id=room_id,
            user_email=user_email,
            reviewer_name=reviewer_name,
            rating=rating,
            comment=comment,
            created_at=dt.datetime.now(dt.UTC),
        )

        item: dict[str, Any] = {
            "review_id": review.review_id,
            "room_id": review.room_id,
            "user_email": review.user_email,
            "rating": review.rating,
            "comment": review.comment,
            "created_at": review.created_at.isoformat(),
        }
        if reviewer_name:
            item["reviewer_name"] = reviewer_name

        self.db.put_item(
            self.TABLE,
            item,
            condition_expression="attribute_not_exists(review_id)",
        )
        return review

    def list_reviews(self, room_id: str | None = None) -> list[Review]:
        """List reviews newest first, for one room or across all rooms."""
        if room_id is None:
            items = self.db.scan(self.TABLE)
        else:
            items = self.db.query(
                self.TABLE,
                Key("room_id").eq(room_id),
                index_name=ROOM_ID_INDEX,
                scan_index_forward=False,
            )

        reviews = [self._item_to_review(item) for item in items]
        # GSI order is by created_at already; the scan needs sorting
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return reviews

    def _item_to_review(self, item: dict[str, Any]) -> Review:
        """Convert DynamoDB item to Review model."""
        return Review(
            review_id=item["review_id"],
            room_id=item["room_id"],
            user_email=item["user_email"],
            reviewer_name=item.get("reviewer_name"),
            rating=int(item["rating"]),
            comment=item.get("comment", ""),
            created_at=dt.datetime.fromisoformat(item["created_at"]),
        )
