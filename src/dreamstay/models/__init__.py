"""Pydantic models for Dream Stay data entities."""

from .auth import Identity, IssuedToken
from .booking import Booking, CancellationResult
from .errors import (
    BookingError,
    ErrorCode,
    ErrorResponse,
    StoreUnavailableError,
)
from .review import Review
from .room import Room, UpdateResult

__all__ = [
    # Rooms
    "Room",
    "UpdateResult",
    # Bookings
    "Booking",
    "CancellationResult",
    # Reviews
    "Review",
    # Auth
    "Identity",
    "IssuedToken",
    # Errors
    "BookingError",
    "ErrorCode",
    "ErrorResponse",
    "StoreUnavailableError",
]
