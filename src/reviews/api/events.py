"""Push-delivery endpoint for ReviewSubmitted.

Used when the event transport pushes messages over HTTP instead of the
Engine pulling them. Any failure answers 500 so the transport redelivers;
the orchestrator's settled-review guard makes redelivery harmless.
"""

import json
from datetime import UTC, datetime

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from reviews.api.schemas import ReviewSubmittedMessage, StatusResponse
from reviews.review.events import ReviewSubmitted
from reviews.review.validation import validate_submitted_review

logger = structlog.get_logger(__name__)

event_router = APIRouter(prefix="/events", tags=["events"])


@event_router.post("/review-submitted", response_model=StatusResponse)
async def review_submitted(message: ReviewSubmittedMessage):
    logger.info("Received review-submitted push", review_id=message.review_id)
    try:
        event = ReviewSubmitted(
            review_id=message.review_id,
            business_id=message.business_id,
            location_id=message.location_id,
            reviewer_id=message.reviewer_id,
            email=message.email,
            star_rating=message.star_rating,
            review_body=message.review_body,
            photo_urls=json.dumps(message.photo_urls) if message.photo_urls else None,
            review_as_anon=message.review_as_anon,
            ip_address=message.ip_address,
            device_id=message.device_id,
            geolocation=message.geolocation,
            user_agent=message.user_agent,
            created_at=message.created_at or datetime.now(UTC),
        )
        status = validate_submitted_review(event)
    except Exception:
        logger.exception("Failed to process review-submitted push", review_id=message.review_id)
        return JSONResponse(status_code=500, content={"error": "Failed to process review validation"})

    return StatusResponse(status=status or "skipped")
