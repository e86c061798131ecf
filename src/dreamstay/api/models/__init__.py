"""API request/response models.

Domain models (Room, Booking, Review) live in dreamstay.models; this package
holds HTTP-layer request bodies only.
"""

from dreamstay.api.models.auth import TokenRequest, TokenResponse
from dreamstay.api.models.bookings import BookingCreateRequest, BookingRescheduleRequest
from dreamstay.api.models.reviews import ReviewCreateRequest
from dreamstay.api.models.rooms import RoomAvailabilityRequest

__all__ = [
    "BookingCreateRequest",
    "BookingRescheduleRequest",
    "ReviewCreateRequest",
    "RoomAvailabilityRequest",
    "TokenRequest",
    "TokenResponse",
]
