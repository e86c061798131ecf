"""Review endpoints.

- POST /reviews (JWT required)
- GET /reviews and GET /reviews/{room_id} (public), newest first
"""

from fastapi import APIRouter, Depends

from dreamstay.api.dependencies import get_review_store
from dreamstay.api.models.reviews import ReviewCreateRequest
from dreamstay.api.security import require_identity
from dreamstay.models import Identity, Review
from dreamstay.services import ReviewStore

router = APIRouter(tags=["reviews"])


@router.post(
    "/reviews",
    summary="Post review",
    response_model=Review,
    responses={
        401: {"description": "JWT token required"},
        404: {"description": "Room not found"},
    },
)
def add_review(
    body: ReviewCreateRequest,
    identity: Identity = Depends(require_identity),
    reviews: ReviewStore = Depends(get_review_store),
) -> Review:
    return reviews.add_review(
        room_id=body.room_id,
        user_email=identity.email,
        rating=body.rating,
        comment=body.comment,
        reviewer_name=body.reviewer_name,
    )


@router.get("/reviews", summary="List all reviews", response_model=list[Review])
def list_reviews(reviews: ReviewStore = Depends(get_review_store)) -> list[Review]:
    return reviews.list_reviews()


@router.get("/reviews/{room_id}", summary="List reviews for a room", response_model=list[Review])
def list_room_reviews(
    room_id: str,
    reviews: ReviewStore = Depends(get_review_store),
) -> list[Review]:
    return reviews.list_reviews(room_id)
