"""Booking endpoints.

Provides REST endpoints for:
- Creating a booking (JWT required)
- Listing a user's bookings (JWT required, owner only)
- Rescheduling a booking (JWT required, owner only)
- Cancelling a booking (JWT required, owner only)

Room availability changes are handled by AvailabilityCoordinator; these
routes only authenticate and translate.
"""

from fastapi import APIRouter, Depends

from dreamstay.api.dependencies import (
    get_authorization_gate,
    get_availability_coordinator,
    get_booking_store,
)
from dreamstay.api.models.bookings import BookingCreateRequest, BookingRescheduleRequest
from dreamstay.api.security import require_identity
from dreamstay.models import Booking, CancellationResult, Identity
from dreamstay.services import AuthorizationGate, AvailabilityCoordinator, BookingStore

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings",
    summary="Create booking",
    description="""
Book a room for the authenticated user.

**Requires JWT authentication.**

The room is claimed atomically: of several concurrent requests for the same
room exactly one succeeds and the others receive 409.
""",
    response_model=Booking,
    responses={
        401: {"description": "JWT token required"},
        403: {"description": "user_email does not match the token"},
        404: {"description": "Room not found"},
        409: {"description": "Room already booked"},
    },
)
def create_booking(
    body: BookingCreateRequest,
    identity: Identity = Depends(require_identity),
    gate: AuthorizationGate = Depends(get_authorization_gate),
    coordinator: AvailabilityCoordinator = Depends(get_availability_coordinator),
) -> Booking:
    if body.user_email is not None:
        gate.authorize_owner(identity, body.user_email)

    return coordinator.create_booking(body.room_id, identity.email, body.booking_date)


@router.get(
    "/bookings/{email}",
    summary="List a user's bookings",
    description="""
List every booking owned by `email`, ordered by date.

**Requires JWT authentication.** The token's email must equal `email`.
""",
    response_model=list[Booking],
    responses={
        401: {"description": "JWT token required"},
        403: {"description": "Token belongs to another user"},
    },
)
def list_user_bookings(
    email: str,
    identity: Identity = Depends(require_identity),
    gate: AuthorizationGate = Depends(get_authorization_gate),
    bookings: BookingStore = Depends(get_booking_store),
) -> list[Booking]:
    gate.authorize_owner(identity, email)
    return bookings.list_for_user(email)


@router.patch(
    "/bookings/{booking_id}",
    summary="Reschedule booking",
    description="""
Change the date of a booking. Room availability is not affected.

**Requires JWT authentication.** Only the booking owner can reschedule.
""",
    response_model=Booking,
    responses={
        401: {"description": "JWT token required"},
        403: {"description": "Not the booking owner"},
        404: {"description": "Booking not found"},
    },
)
def reschedule_booking(
    booking_id: str,
    body: BookingRescheduleRequest,
    identity: Identity = Depends(require_identity),
    coordinator: AvailabilityCoordinator = Depends(get_availability_coordinator),
) -> Booking:
    return coordinator.reschedule_booking(booking_id, identity.email, body.booking_date)


@router.delete(
    "/bookings/{booking_id}",
    summary="Cancel booking",
    description="""
Cancel a booking and make its room available again.

**Requires JWT authentication.** Only the booking owner can cancel.
""",
    response_model=CancellationResult,
    responses={
        401: {"description": "JWT token required"},
        403: {"description": "Not the booking owner"},
        404: {"description": "Booking not found"},
        500: {"description": "Booking cancelled but room release failed"},
    },
)
def cancel_booking(
    booking_id: str,
    identity: Identity = Depends(require_identity),
    coordinator: AvailabilityCoordinator = Depends(get_availability_coordinator),
) -> CancellationResult:
    return coordinator.cancel_booking(booking_id, identity.email)
