"""Health check endpoints."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from dreamstay import __version__

router = APIRouter(tags=["health"])


@router.get("/", summary="Service banner")
async def root() -> str:
    return "Dream Stay Server Is Running"


@router.get("/health", summary="Health check")
async def health() -> dict[str, Any]:
    """Liveness probe. Does not touch the store."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "dreamstay-api",
    }
