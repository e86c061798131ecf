"""Review model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Review(BaseModel):
    """A guest review of a room. Immutable once stored."""

    # strict=False: response validation re-reads created_at from its JSON form
    model_config = ConfigDict(strict=False)

    review_id: str
    room_id: str
    user_email: EmailStr
    reviewer_name: str | None = None
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    created_at: datetime
