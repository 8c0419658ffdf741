"""FastAPI routes for the public Reviews API.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts).
"""

import json

from fastapi import APIRouter, Request, Response
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    EditReviewRequest,
    ReviewAcceptedResponse,
    ReviewResponse,
    ReviewStatusResponse,
    SubmitReviewRequest,
)
from reviews.config import get_settings
from reviews.review.editing import EditReview
from reviews.review.queries import get_review, get_review_status, list_approved_for_business
from reviews.review.removal import DeleteReview
from reviews.review.review import Review
from reviews.review.submission import SubmitReview

review_router = APIRouter(prefix="/reviews", tags=["reviews"])


def _client_ip(request: Request) -> str | None:
    """Caller address. X-Forwarded-For is honoured only from a trusted proxy."""
    peer = request.client.host if request.client else None
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded and peer in get_settings().trusted_proxies:
        return forwarded.split(",")[0].strip()
    return peer


def to_response(review: Review) -> ReviewResponse:
    """Public view of a review. Anonymous reviews hide who wrote them."""
    anonymous = bool(review.review_as_anon)
    return ReviewResponse(
        review_id=str(review.id),
        business_id=str(review.business_id),
        location_id=str(review.location_id) if review.location_id else None,
        reviewer_id=None if anonymous or not review.reviewer_id else str(review.reviewer_id),
        email=None if anonymous else review.email,
        star_rating=review.star_rating,
        review_body=review.review_body,
        photo_urls=review.photo_list(),
        review_as_anon=anonymous,
        status=review.status,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )


@review_router.post("", status_code=202, response_model=ReviewAcceptedResponse)
async def submit_review(body: SubmitReviewRequest, request: Request) -> ReviewAcceptedResponse:
    """Accept a review for asynchronous validation."""
    command = SubmitReview(
        business_id=body.business_id,
        location_id=body.location_id,
        reviewer_id=body.reviewer_id,
        email=body.email,
        star_rating=body.star_rating,
        review_body=body.review_body,
        photo_urls=json.dumps(body.photo_urls) if body.photo_urls else None,
        review_as_anon=body.review_as_anon,
        ip_address=_client_ip(request),
        device_id=request.headers.get("x-device-id"),
        geolocation=request.headers.get("x-geolocation"),
        user_agent=request.headers.get("user-agent"),
    )
    review_id = current_domain.process(command, asynchronous=False)

    review = get_review(review_id)
    return ReviewAcceptedResponse(review_id=review_id, status=review.status, review=to_response(review))


@review_router.get("/business/{business_id}", response_model=list[ReviewResponse])
async def list_business_reviews(business_id: str) -> list[ReviewResponse]:
    """Approved reviews of a business, newest first."""
    return [to_response(review) for review in list_approved_for_business(business_id)]


@review_router.get("/{review_id}/status", response_model=ReviewStatusResponse)
async def review_status(review_id: str, email: str | None = None) -> ReviewStatusResponse:
    """Validation status, for the submitter holding the review's email."""
    view = get_review_status(review_id, email)
    return ReviewStatusResponse(
        review_id=view.review_id,
        status=view.status,
        validated_at=view.validated_at,
        validation_result=view.validation_result,
    )


@review_router.get("/{review_id}", response_model=ReviewResponse)
async def fetch_review(review_id: str) -> ReviewResponse:
    return to_response(get_review(review_id))


@review_router.put("/{review_id}", response_model=ReviewResponse)
async def edit_review(review_id: str, body: EditReviewRequest) -> ReviewResponse:
    """Edit review content as its owner."""
    command = EditReview(
        review_id=review_id,
        reviewer_id=body.reviewer_id,
        email=body.email,
        star_rating=body.star_rating,
        review_body=body.review_body,
        photo_urls=json.dumps(body.photo_urls) if body.photo_urls is not None else None,
        review_as_anon=body.review_as_anon,
    )
    current_domain.process(command, asynchronous=False)
    return to_response(get_review(review_id))


@review_router.delete("/{review_id}", status_code=204)
async def delete_review(review_id: str, reviewer_id: str | None = None, email: str | None = None) -> Response:
    """Delete a review as its owner."""
    command = DeleteReview(review_id=review_id, reviewer_id=reviewer_id, email=email)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)
