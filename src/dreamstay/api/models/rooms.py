"""API models for room endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RoomAvailabilityRequest(BaseModel):
    """Manual availability toggle.

    `booking: true` marks the room as booked (unavailable), `false` frees it.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"booking": True}]},
    )

    booking: bool = Field(..., description="True marks the room booked")
