"""Room endpoints.

Provides REST endpoints for:
- Listing rooms with an optional price range (public)
- Getting a single room (public)
- Manually toggling a room's availability (JWT required)
"""

from fastapi import APIRouter, Depends, Query

from dreamstay.api.dependencies import get_availability_coordinator, get_room_store
from dreamstay.api.models.rooms import RoomAvailabilityRequest
from dreamstay.api.security import require_identity
from dreamstay.models import BookingError, ErrorCode, Identity, Room, UpdateResult
from dreamstay.services import AvailabilityCoordinator, RoomStore

router = APIRouter(tags=["rooms"])


@router.get(
    "/rooms",
    summary="List rooms",
    description="""
List rooms, optionally filtered by nightly price.

**Public endpoint** - no authentication required.

**Notes:**
- `minRange`/`maxRange` are inclusive bounds
- Missing or zero bounds are ignored; with both ignored every room is returned
- Results are not paginated
""",
    response_model=list[Room],
)
def list_rooms(
    min_range: int | None = Query(
        default=None,
        alias="minRange",
        description="Lowest nightly price to include",
    ),
    max_range: int | None = Query(
        default=None,
        alias="maxRange",
        description="Highest nightly price to include",
    ),
    rooms: RoomStore = Depends(get_room_store),
) -> list[Room]:
    return rooms.list_rooms(min_range, max_range)


@router.get(
    "/rooms/{room_id}",
    summary="Get room",
    response_model=Room,
    responses={404: {"description": "Room not found"}},
)
def get_room(
    room_id: str,
    rooms: RoomStore = Depends(get_room_store),
) -> Room:
    room = rooms.get_room(room_id)
    if room is None:
        raise BookingError(
            code=ErrorCode.ROOM_NOT_FOUND,
            details={"room_id": room_id},
        )
    return room


@router.patch(
    "/rooms/{room_id}",
    summary="Toggle room availability",
    description="""
Manually mark a room booked or free.

**Requires JWT authentication.**

This is an administrative override: it does not create or remove bookings,
so it can leave a room's flag out of step with its bookings.
""",
    response_model=UpdateResult,
    responses={
        401: {"description": "JWT token required"},
        404: {"description": "Room not found"},
    },
)
def set_room_availability(
    room_id: str,
    body: RoomAvailabilityRequest,
    identity: Identity = Depends(require_identity),
    coordinator: AvailabilityCoordinator = Depends(get_availability_coordinator),
) -> UpdateResult:
    return coordinator.direct_set_availability(room_id, available=not body.booking)
