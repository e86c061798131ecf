"""Room store: room listings and their availability flag."""

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import Attr

from dreamstay.models import BookingError, ErrorCode, Room, UpdateResult
from dreamstay.services.tables import ROOMS_TABLE

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService


class RoomStore:
    """Service for reading rooms and toggling availability."""

    TABLE = ROOMS_TABLE

    def __init__(self, db: "DynamoDBService") -> None:
        self.db = db

    def list_rooms(
        self,
        min_price: int | None = None,
        max_price: int | None = None,
    ) -> list[Room]:
        """List rooms, optionally filtered by an inclusive price range.

        Bounds that are missing or non-positive are ignored. With both ignored
        every room is returned; with only one given the other side is open.

        Args:
            min_price: Lowest price to include
            max_price: Highest price to include

        Returns:
            Matching rooms ordered by price
        """
        low = min_price if min_price and min_price > 0 else None
        high = max_price if max_price and max_price > 0 else None

        if low is not None and high is not None and low > high:
            return []

        condition = None
        if low is not None:
            condition = Attr("price").gte(low)
        if high is not None:
            upper = Attr("price").lte(high)
            condition = upper if condition is None else condition & upper

        items = self.db.scan(self.TABLE, filter_expression=condition)
        rooms = [self._item_to_room(item) for item in items]
        rooms.sort(key=lambda r: (r.price, r.room_id))
        return rooms

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by ID, or None if it does not exist."""
        item = self.db.get_item(self.TABLE, {"room_id": room_id})
        if not item:
            return None
        return self._item_to_room(item)

    def set_availability(self, room_id: str, available: bool) -> UpdateResult:
        """Set the availability flag of a room.

        Idempotent: writing the current value succeeds with modified=False.

        Raises:
            BookingError: ROOM_NOT_FOUND if the room does not exist
        """
        old = self.db.update_item(
            self.TABLE,
            {"room_id": room_id},
            "SET available = :available",
            {":available": available},
            condition_expression="attribute_exists(room_id)",
            return_values="ALL_OLD",
        )
        if old is None:
            raise BookingError(
                code=ErrorCode.ROOM_NOT_FOUND,
                details={"room_id": room_id},
            )

        return UpdateResult(
            room_id=room_id,
            available=available,
            modified=old.get("available") != available,
        )

    def put_room(self, room: Room, overwrite: bool = True) -> bool:
        """Store a room record (seeding and fixtures).

        With overwrite=False an existing room is left untouched, including
        any booking holding it.

        Returns:
            True if written, False if the room already existed
        """
        item = self._room_to_item(room)
        condition = None if overwrite else "attribute_not_exists(room_id)"
        return self.db.put_item(self.TABLE, item, condition_expression=condition)

    def _room_to_item(self, room: Room) -> dict[str, Any]:
        item = room.model_dump(exclude_none=True)
        if room.booking_id:
            item["booking_id"] = room.booking_id
        return item

    def _item_to_room(self, item: dict[str, Any]) -> Room:
        """Convert DynamoDB item to Room model."""
        return Room(
            room_id=item["room_id"],
            title=item["title"],
            description=item.get("description", ""),
            price=_to_int(item["price"]),
            available=bool(item.get("available", True)),
            location=item.get("location"),
            images=list(item.get("images", [])),
            amenities=list(item.get("amenities", [])),
            max_guests=_to_int(item.get("max_guests", 2)),
            booking_id=item.get("booking_id"),
        )


def _to_int(value: Decimal | int | str) -> int:
    """DynamoDB returns numbers as Decimal."""
    return int(value)
