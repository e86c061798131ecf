"""Room models.

A room is a bookable listing with a nightly price and a single boolean
availability flag. There is no per-date calendar: a room is either held by
one booking or free.
"""

from pydantic import BaseModel, ConfigDict, Field


class Room(BaseModel):
    """A bookable room listing."""

    model_config = ConfigDict(strict=True)

    room_id: str = Field(..., description="Unique room ID")
    title: str = Field(..., description="Listing title")
    description: str = Field(default="", description="Listing description")
    price: int = Field(..., ge=0, description="Nightly price in whole currency units")
    available: bool = Field(default=True, description="False while a booking holds the room")
    location: str | None = Field(default=None, description="City or area")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    amenities: list[str] = Field(default_factory=list)
    max_guests: int = Field(default=2, ge=1)
    booking_id: str | None = Field(
        default=None,
        exclude=True,
        description="Booking currently holding the room (internal)",
    )


class UpdateResult(BaseModel):
    """Outcome of an availability update."""

    model_config = ConfigDict(strict=True)

    room_id: str
    available: bool = Field(..., description="Availability after the update")
    modified: bool = Field(..., description="False when the flag already had this value")
