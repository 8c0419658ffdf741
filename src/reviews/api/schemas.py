"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
Content rules (rating range, body length, photo count) are enforced by the
Review aggregate so that every entry point reports them the same way.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitReviewRequest(BaseModel):
    business_id: str
    location_id: str | None = None
    reviewer_id: str | None = None
    email: str | None = None
    star_rating: int
    review_body: str
    photo_urls: list[str] | None = None
    review_as_anon: bool = False


class EditReviewRequest(BaseModel):
    reviewer_id: str | None = None
    email: str | None = None
    star_rating: int | None = None
    review_body: str | None = None
    photo_urls: list[str] | None = None
    review_as_anon: bool | None = None


class ReviewSubmittedMessage(BaseModel):
    """Push-delivered ReviewSubmitted payload."""

    review_id: str
    business_id: str
    location_id: str | None = None
    reviewer_id: str | None = None
    email: str | None = None
    star_rating: int
    review_body: str
    photo_urls: list[str] | None = None
    review_as_anon: bool = False
    ip_address: str | None = None
    device_id: str | None = None
    geolocation: str | None = None
    user_agent: str | None = None
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewResponse(BaseModel):
    review_id: str
    business_id: str
    location_id: str | None = None
    reviewer_id: str | None = None
    email: str | None = None
    star_rating: int
    review_body: str
    photo_urls: list[str] = []
    review_as_anon: bool = False
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReviewAcceptedResponse(BaseModel):
    review_id: str
    status: str
    review: ReviewResponse


class ReviewStatusResponse(BaseModel):
    review_id: str
    status: str
    validated_at: datetime | None = None
    validation_result: dict | None = None


class StatusResponse(BaseModel):
    status: str = "ok"


class DuplicateCheckResponse(BaseModel):
    has_duplicate: bool


class FrequencyCheckResponse(BaseModel):
    count: int


class CategoryCheckResponse(BaseModel):
    has_reviewed: bool


class SpikeCheckResponse(BaseModel):
    total_reviews: int
    positive_reviews: int
    negative_reviews: int
    imbalance_ratio: float
