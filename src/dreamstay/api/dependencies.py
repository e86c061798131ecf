"""FastAPI dependency providers for the service handles.

Services are built once per application in the lifespan handler
(see dreamstay.api.main.create_app) and stored on `app.state`. The providers
below hand them to routes, so nothing is a module-level singleton and tests
can build an app around their own storage handle.

Usage in routes:
    from dreamstay.api.dependencies import get_room_store

    @router.get("/rooms")
    def list_rooms(rooms: RoomStore = Depends(get_room_store)):
        ...

Service Dependency Graph:
    DynamoDBService (connected in lifespan, closed on shutdown)
        ├── RoomStore
        │       └── ReviewStore
        ├── BookingStore
        └── AvailabilityCoordinator (RoomStore, BookingStore)
    AuthorizationGate (Settings.token_secret)
"""

from fastapi import Request
from starlette.datastructures import State

from dreamstay.config import Settings
from dreamstay.services import (
    AuthorizationGate,
    AvailabilityCoordinator,
    BookingStore,
    DynamoDBService,
    ReviewStore,
    RoomStore,
)


def build_services(app_state: State, db: DynamoDBService, settings: Settings) -> None:
    """Construct every service around a connected storage handle."""
    rooms = RoomStore(db)
    bookings = BookingStore(db)

    app_state.db = db
    app_state.rooms = rooms
    app_state.bookings = bookings
    app_state.coordinator = AvailabilityCoordinator(db, rooms, bookings)
    app_state.reviews = ReviewStore(db, rooms)
    app_state.gate = AuthorizationGate(
        settings.token_secret,
        ttl_seconds=settings.token_ttl_seconds,
    )


def get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_room_store(request: Request) -> RoomStore:
    rooms: RoomStore = request.app.state.rooms
    return rooms


def get_booking_store(request: Request) -> BookingStore:
    bookings: BookingStore = request.app.state.bookings
    return bookings


def get_availability_coordinator(request: Request) -> AvailabilityCoordinator:
    coordinator: AvailabilityCoordinator = request.app.state.coordinator
    return coordinator


def get_review_store(request: Request) -> ReviewStore:
    reviews: ReviewStore = request.app.state.reviews
    return reviews


def get_authorization_gate(request: Request) -> AuthorizationGate:
    gate: AuthorizationGate = request.app.state.gate
    return gate
