"""Booking models."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Booking(BaseModel):
    """A user's booking of a room.

    While a booking exists its room is unavailable. Cancelling deletes the
    record and releases the room.
    """

    # strict=False: response validation re-reads dates from their JSON form
    model_config = ConfigDict(strict=False)

    booking_id: str = Field(..., description="Unique booking ID (UUID)")
    room_id: str = Field(..., description="Booked room")
    user_email: EmailStr = Field(..., description="Owner of the booking")
    booking_date: date = Field(..., description="Requested stay date")
    price: int | None = Field(
        default=None,
        ge=0,
        description="Room price at the time of booking",
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last reschedule timestamp")


class CancellationResult(BaseModel):
    """Result of cancelling a booking."""

    model_config = ConfigDict(strict=True)

    booking_id: str
    room_id: str
    deleted: bool = True
    room_released: bool = Field(
        ...,
        description="False when another booking or an override now holds the room",
    )
