"""API routes package.

Routers are organized by resource:

- health: Service banner and health check
- rooms: Room listing and availability override
- bookings: Booking lifecycle
- reviews: Room reviews
- auth: Identity token cookie

All routers are registered in main.py.
"""

from dreamstay.api.routes.auth import router as auth_router
from dreamstay.api.routes.bookings import router as bookings_router
from dreamstay.api.routes.health import router as health_router
from dreamstay.api.routes.reviews import router as reviews_router
from dreamstay.api.routes.rooms import router as rooms_router

__all__ = [
    "auth_router",
    "bookings_router",
    "health_router",
    "reviews_router",
    "rooms_router",
]
