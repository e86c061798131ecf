"""Backend services for Dream Stay."""

from .auth import AuthorizationGate
from .availability import AvailabilityCoordinator
from .bookings import BookingStore
from .dynamodb import DynamoDBService
from .reviews import ReviewStore
from .rooms import RoomStore

__all__ = [
    "AuthorizationGate",
    "AvailabilityCoordinator",
    "BookingStore",
    "DynamoDBService",
    "ReviewStore",
    "RoomStore",
]
