"""API models for review endpoints."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ReviewCreateRequest(BaseModel):
    """Request to post a review. The author is the authenticated caller."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "room_id": "room-101",
                    "rating": 5,
                    "comment": "Lovely view and very quiet",
                    "reviewer_name": "Ana",
                }
            ]
        },
    )

    room_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("room_id", "roomId")
    )
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(default="", max_length=2000)
    reviewer_name: str | None = Field(default=None, max_length=100)
