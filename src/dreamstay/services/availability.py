"""Availability coordinator: booking lifecycle and room state transitions.

A room's `available` flag is the only arbitration signal between competing
booking requests. The invariant maintained here:

    room.available is False  <=>  exactly one live booking references the room

Creating a booking claims the room and inserts the booking in one DynamoDB
transaction, conditional on the room still being available, so at most one of
any set of concurrent requests can succeed and a failed insert never leaves
the room claimed.

Cancelling is two writes (delete booking, then release room). If the release
fails the room stays unavailable with no live booking; that state is logged
as needing repair and fixed by reconcile_room().
"""

import datetime as dt
import uuid
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import Attr
from boto3.dynamodb.types import TypeSerializer

from dreamstay.models import (
    Booking,
    BookingError,
    CancellationResult,
    ErrorCode,
    StoreUnavailableError,
    UpdateResult,
)
from dreamstay.services.tables import BOOKINGS_TABLE, ROOMS_TABLE
from dreamstay.utils.logging import get_logger, log_booking_operation

if TYPE_CHECKING:
    from .bookings import BookingStore
    from .dynamodb import DynamoDBService
    from .rooms import RoomStore

logger = get_logger(__name__)

_serializer = TypeSerializer()


class AvailabilityCoordinator:
    """Mediates room availability for booking create/cancel/reschedule."""

    def __init__(
        self,
        db: "DynamoDBService",
        rooms: "RoomStore",
        bookings: "BookingStore",
    ) -> None:
        self.db = db
        self.rooms = rooms
        self.bookings = bookings

    def create_booking(
        self,
        room_id: str,
        user_email: str,
        booking_date: dt.date,
    ) -> Booking:
        """Book a room for a user.

        Args:
            room_id: Room to book
            user_email: Verified email of the booking owner
            booking_date: Requested date

        Returns:
            The created booking

        Raises:
            BookingError: ROOM_NOT_FOUND if the room does not exist,
                ROOM_UNAVAILABLE if another booking already holds it
        """
        room = self.rooms.get_room(room_id)
        if room is None:
            log_booking_operation(
                logger, "create_booking", room_id=room_id, user_email=user_email,
                result="not_found",
            )
            raise BookingError(
                code=ErrorCode.ROOM_NOT_FOUND,
                details={"room_id": room_id},
            )

        booking = Booking(
            booking_id=str(uuid.uuid4()),
            room_id=room_id,
            user_email=user_email,
            booking_date=booking_date,
            price=room.price,
            created_at=dt.datetime.now(dt.UTC),
        )

        if not room.available or not self._claim_and_insert(booking):
            log_booking_operation(
                logger, "create_booking", room_id=room_id, user_email=user_email,
                result="conflict",
            )
            raise BookingError(
                code=ErrorCode.ROOM_UNAVAILABLE,
                details={"room_id": room_id},
            )

        log_booking_operation(
            logger, "create_booking", booking_id=booking.booking_id,
            room_id=room_id, user_email=user_email, result="success",
        )
        return booking

    def cancel_booking(self, booking_id: str, caller_email: str) -> CancellationResult:
        """Cancel a booking and release its room.

        Args:
            booking_id: Booking to cancel
            caller_email: Verified email of the caller

        Returns:
            CancellationResult; room_released is False when the room is now
            held by something other than this booking

        Raises:
            BookingError: BOOKING_NOT_FOUND, UNAUTHORIZED (caller is not the
                owner, nothing is changed), or AVAILABILITY_RESTORE_FAILED
                (booking deleted but room release failed)
        """
        booking = self._get_owned_booking("cancel_booking", booking_id, caller_email)

        # Conditional delete: a replayed or concurrent cancel sees NotFound
        # and never releases the room a second time.
        if not self.bookings.delete(booking_id):
            log_booking_operation(
                logger, "cancel_booking", booking_id=booking_id,
                user_email=caller_email, result="not_found",
            )
            raise BookingError(
                code=ErrorCode.BOOKING_NOT_FOUND,
                details={"booking_id": booking_id},
            )

        try:
            released = self._release_room(booking.room_id, booking_id)
        except StoreUnavailableError as e:
            log_booking_operation(
                logger, "cancel_booking", booking_id=booking_id,
                room_id=booking.room_id, user_email=caller_email,
                result="repair_needed", error=f"room release failed ({e.operation})",
            )
            raise BookingError(
                code=ErrorCode.AVAILABILITY_RESTORE_FAILED,
                details={"booking_id": booking_id, "room_id": booking.room_id},
            ) from e

        if not released:
            logger.warning(
                "Room %s not released by booking %s: held by another booking or override",
                booking.room_id,
                booking_id,
            )

        log_booking_operation(
            logger, "cancel_booking", booking_id=booking_id,
            room_id=booking.room_id, user_email=caller_email, result="success",
            room_released=released,
        )
        return CancellationResult(
            booking_id=booking_id,
            room_id=booking.room_id,
            room_released=released,
        )

    def reschedule_booking(
        self,
        booking_id: str,
        caller_email: str,
        new_date: dt.date,
    ) -> Booking:
        """Move a booking to another date.

        Only the date changes; the room stays held by this booking.

        Raises:
            BookingError: BOOKING_NOT_FOUND or UNAUTHORIZED
        """
        booking = self._get_owned_booking("reschedule_booking", booking_id, caller_email)

        updated = self.bookings.update_date(booking_id, new_date)
        if updated is None:
            raise BookingError(
                code=ErrorCode.BOOKING_NOT_FOUND,
                details={"booking_id": booking_id},
            )

        log_booking_operation(
            logger, "reschedule_booking", booking_id=booking_id,
            room_id=booking.room_id, user_email=caller_email, result="success",
            previous_date=booking.booking_date.isoformat(),
            new_date=new_date.isoformat(),
        )
        return updated

    def direct_set_availability(self, room_id: str, available: bool) -> UpdateResult:
        """Administrative override of a room's availability flag.

        Bypasses the booking invariant: no booking is created or removed.
        Misuse can leave a room available while a booking exists (or the
        reverse); reconcile_room() only repairs the latter.
        """
        result = self.rooms.set_availability(room_id, available)
        log_booking_operation(
            logger, "direct_set_availability", room_id=room_id, result="override",
            available=available, modified=result.modified,
        )
        return result

    def reconcile_room(self, room_id: str) -> bool:
        """Release a room whose holding booking no longer exists.

        Repairs the window left by a cancel whose room release failed.
        Rooms made unavailable by an override (no holding booking) are left
        alone.

        Returns:
            True if the room was released
        """
        room = self.rooms.get_room(room_id)
        if room is None:
            raise BookingError(
                code=ErrorCode.ROOM_NOT_FOUND,
                details={"room_id": room_id},
            )

        if room.available or room.booking_id is None:
            return False
        if self.bookings.exists(room.booking_id):
            return False

        released = self._release_room(room_id, room.booking_id)
        log_booking_operation(
            logger, "reconcile_room", booking_id=room.booking_id, room_id=room_id,
            result="success" if released else "skipped", released=released,
        )
        return released

    def reconcile_all(self) -> list[str]:
        """Run reconcile_room() over every unavailable room.

        Returns:
            IDs of rooms that were released
        """
        items = self.db.scan(ROOMS_TABLE, filter_expression=Attr("available").eq(False))
        return [item["room_id"] for item in items if self.reconcile_room(item["room_id"])]

    def _get_owned_booking(self, operation: str, booking_id: str, caller_email: str) -> Booking:
        booking = self.bookings.get_booking(booking_id)
        if booking is None:
            log_booking_operation(
                logger, operation, booking_id=booking_id, user_email=caller_email,
                result="not_found",
            )
            raise BookingError(
                code=ErrorCode.BOOKING_NOT_FOUND,
                details={"booking_id": booking_id},
            )

        if booking.user_email != caller_email:
            log_booking_operation(
                logger, operation, booking_id=booking_id, user_email=caller_email,
                result="forbidden",
            )
            raise BookingError(
                code=ErrorCode.UNAUTHORIZED,
                details={"booking_id": booking_id},
            )

        return booking

    def _claim_and_insert(self, booking: Booking) -> bool:
        """Flip the room to unavailable and insert the booking atomically.

        Returns:
            True if committed, False if the room was no longer available
        """
        item = self.bookings.booking_to_item(booking)

        transact_items: list[dict[str, Any]] = [
            {
                "Update": {
                    "TableName": self.db.table_name(ROOMS_TABLE),
                    "Key": {"room_id": {"S": booking.room_id}},
                    "UpdateExpression": "SET available = :false, booking_id = :bid",
                    "ConditionExpression": "available = :true",
                    "ExpressionAttributeValues": {
                        ":false": {"BOOL": False},
                        ":true": {"BOOL": True},
                        ":bid": {"S": booking.booking_id},
                    },
                }
            },
            {
                "Put": {
                    "TableName": self.db.table_name(BOOKINGS_TABLE),
                    "Item": {k: _serializer.serialize(v) for k, v in item.items()},
                    "ConditionExpression": "attribute_not_exists(booking_id)",
                }
            },
        ]

        return self.db.transact_write(transact_items)

    def _release_room(self, room_id: str, booking_id: str) -> bool:
        """Mark a room available if this booking (or nothing) holds it.

        Returns:
            True if released, False if another booking holds the room
        """
        attrs = self.db.update_item(
            ROOMS_TABLE,
            {"room_id": room_id},
            "SET available = :true REMOVE booking_id",
            {":true": True, ":bid": booking_id},
            condition_expression=(
                "attribute_exists(room_id) AND "
                "(booking_id = :bid OR attribute_not_exists(booking_id))"
            ),
        )
        return attrs is not None
