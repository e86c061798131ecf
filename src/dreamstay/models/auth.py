"""Identity models produced by the authorization gate."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Identity(BaseModel):
    """Authenticated caller, extracted from a verified token."""

    model_config = ConfigDict(strict=True, frozen=True)

    email: EmailStr = Field(..., description="Email bound to the token")
    issued_at: datetime
    expires_at: datetime


class IssuedToken(BaseModel):
    """A freshly signed identity token."""

    model_config = ConfigDict(strict=True)

    token: str
    expires_at: datetime
