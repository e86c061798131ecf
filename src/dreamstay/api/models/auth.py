"""API models for token endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class TokenRequest(BaseModel):
    """Request a signed identity token for an email.

    The email is assumed to be verified by the frontend's identity provider.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"email": "guest@example.com"}]},
    )

    email: EmailStr = Field(..., description="Email to bind to the token")


class TokenResponse(BaseModel):
    """Confirmation that the credential cookie was set."""

    model_config = ConfigDict(strict=False)

    success: bool = True
    expires_at: datetime | None = None
