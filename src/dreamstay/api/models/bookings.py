"""API models for booking endpoints."""

from datetime import date

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field


class BookingCreateRequest(BaseModel):
    """Request to book a room.

    The owner is the authenticated caller. `user_email` may be sent by
    clients that echo it; it must then match the caller.
    """

    model_config = ConfigDict(
        # Note: strict=False allows string-to-date coercion from JSON
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "room_id": "room-101",
                    "booking_date": "2025-07-15",
                    "user_email": "guest@example.com",
                }
            ]
        },
    )

    room_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("room_id", "roomId"),
        description="Room to book",
    )
    booking_date: date = Field(
        ...,
        validation_alias=AliasChoices("booking_date", "date", "dateString"),
        description="Requested date (YYYY-MM-DD)",
        examples=["2025-07-15"],
    )
    user_email: EmailStr | None = Field(
        default=None,
        validation_alias=AliasChoices("user_email", "email"),
        description="Optional; must equal the authenticated email",
    )


class BookingRescheduleRequest(BaseModel):
    """Request to move a booking to another date."""

    model_config = ConfigDict(
        strict=False,
        json_schema_extra={"examples": [{"booking_date": "2025-07-20"}]},
    )

    booking_date: date = Field(
        ...,
        validation_alias=AliasChoices("booking_date", "date", "dateString"),
        description="New date (YYYY-MM-DD)",
    )
