"""Booking store: persistence for booking records.

The store only reads and writes booking rows. Anything that also touches a
room's availability goes through AvailabilityCoordinator.
"""

import datetime as dt
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import Key

from dreamstay.models import Booking
from dreamstay.services.tables import BOOKINGS_TABLE, USER_EMAIL_INDEX

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService


class BookingStore:
    """Service for booking records."""

    TABLE = BOOKINGS_TABLE

    def __init__(self, db: "DynamoDBService") -> None:
        self.db = db

    def get_booking(self, booking_id: str) -> Booking | None:
        """Get a booking by ID, or None if it does not exist."""
        item = self.db.get_item(self.TABLE, {"booking_id": booking_id})
        if not item:
            return None
        return self.item_to_booking(item)

    def list_for_user(self, user_email: str) -> list[Booking]:
        """List a user's bookings ordered by booking date."""
        items = self.db.query(
            self.TABLE,
            Key("user_email").eq(user_email),
            index_name=USER_EMAIL_INDEX,
        )
        bookings = [self.item_to_booking(item) for item in items]
        bookings.sort(key=lambda b: (b.booking_date, b.created_at))
        return bookings

    def update_date(self, booking_id: str, booking_date: dt.date) -> Booking | None:
        """Change the booking date of an existing booking.

        Returns:
            Updated booking, or None if the booking no longer exists
        """
        now = dt.datetime.now(dt.UTC)
        attrs = self.db.update_item(
            self.TABLE,
            {"booking_id": booking_id},
            "SET booking_date = :d, updated_at = :u",
            {":d": booking_date.isoformat(), ":u": now.isoformat()},
            condition_expression="attribute_exists(booking_id)",
        )
        if attrs is None:
            return None
        return self.item_to_booking(attrs)

    def delete(self, booking_id: str) -> bool:
        """Delete a booking.

        Returns:
            True if this call deleted it, False if it was already gone
        """
        return self.db.delete_item(
            self.TABLE,
            {"booking_id": booking_id},
            condition_expression="attribute_exists(booking_id)",
        )

    def exists(self, booking_id: str) -> bool:
        return self.db.get_item(self.TABLE, {"booking_id": booking_id}) is not None

    @staticmethod
    def booking_to_item(booking: Booking) -> dict[str, Any]:
        """Convert Booking to a DynamoDB item (dates as ISO strings)."""
        item: dict[str, Any] = {
            "booking_id": booking.booking_id,
            "room_id": booking.room_id,
            "user_email": booking.user_email,
            "booking_date": booking.booking_date.isoformat(),
            "created_at": booking.created_at.isoformat(),
        }
        if booking.price is not None:
            item["price"] = booking.price
        if booking.updated_at is not None:
            item["updated_at"] = booking.updated_at.isoformat()
        return item

    @staticmethod
    def item_to_booking(item: dict[str, Any]) -> Booking:
        """Convert DynamoDB item to Booking model."""
        updated_at = item.get("updated_at")
        price = item.get("price")
        return Booking(
            booking_id=item["booking_id"],
            room_id=item["room_id"],
            user_email=item["user_email"],
            booking_date=dt.date.fromisoformat(item["booking_date"]),
            price=int(price) if price is not None else None,
            created_at=dt.datetime.fromisoformat(item["created_at"]),
            updated_at=dt.datetime.fromisoformat(updated_at) if updated_at else None,
        )
