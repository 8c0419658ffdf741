"""Internal abuse-query API, consumed by the compliance rule engine.

Service-to-service only: every request must carry the shared token in the
``X-Internal-Token`` header.
"""

import secrets
from datetime import timedelta

from fastapi import APIRouter, Depends, Header, HTTPException
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    CategoryCheckResponse,
    DuplicateCheckResponse,
    FrequencyCheckResponse,
    SpikeCheckResponse,
)
from reviews.config import get_settings
from reviews.review.repository import ReviewerIdentity
from reviews.review.review import Review


def require_internal_token(x_internal_token: str = Header(default="")) -> None:
    if not x_internal_token:
        raise HTTPException(status_code=401, detail="Missing internal token")
    if not secrets.compare_digest(x_internal_token.encode(), get_settings().internal_api_token.encode()):
        raise HTTPException(status_code=403, detail="Invalid internal token")


internal_router = APIRouter(
    prefix="/internal/review-query",
    tags=["internal"],
    dependencies=[Depends(require_internal_token)],
)


def _identity(reviewer_id, email, ip_address, device_id) -> ReviewerIdentity:
    return ReviewerIdentity(reviewer_id=reviewer_id, email=email, ip_address=ip_address, device_id=device_id)


def _repo():
    return current_domain.repository_for(Review)


@internal_router.get("/check-duplicate", response_model=DuplicateCheckResponse)
async def check_duplicate(
    business_id: str,
    reviewer_id: str | None = None,
    email: str | None = None,
    ip_address: str | None = None,
    device_id: str | None = None,
    hours: int | None = None,
) -> DuplicateCheckResponse:
    window = timedelta(hours=hours if hours is not None else get_settings().duplicate_window_hours)
    found = _repo().has_recent_settled_review(
        business_id, _identity(reviewer_id, email, ip_address, device_id), window
    )
    return DuplicateCheckResponse(has_duplicate=found)


@internal_router.get("/frequency-check", response_model=FrequencyCheckResponse)
async def frequency_check(
    reviewer_id: str | None = None,
    email: str | None = None,
    ip_address: str | None = None,
    device_id: str | None = None,
    hours: int | None = None,
) -> FrequencyCheckResponse:
    window = timedelta(hours=hours if hours is not None else get_settings().frequency_window_hours)
    count = _repo().count_recent_settled_reviews(_identity(reviewer_id, email, ip_address, device_id), window)
    return FrequencyCheckResponse(count=count)


@internal_router.get("/category-check", response_model=CategoryCheckResponse)
async def category_check(
    category: str = "",
    reviewer_id: str | None = None,
    email: str | None = None,
    ip_address: str | None = None,
    device_id: str | None = None,
    hours: int | None = None,
) -> CategoryCheckResponse:
    if not category.strip():
        raise HTTPException(status_code=400, detail="category is required")

    window = timedelta(hours=hours if hours is not None else get_settings().category_window_hours)
    found = _repo().has_settled_review_in_category(
        _identity(reviewer_id, email, ip_address, device_id), category, window
    )
    return CategoryCheckResponse(has_reviewed=found)


@internal_router.get("/spike-check", response_model=SpikeCheckResponse)
async def spike_check(business_id: str, hours: int | None = None) -> SpikeCheckResponse:
    window = timedelta(hours=hours if hours is not None else get_settings().spike_window_hours)
    stats = _repo().review_stats(business_id, window)
    return SpikeCheckResponse(
        total_reviews=stats.total_reviews,
        positive_reviews=stats.positive_count,
        negative_reviews=stats.negative_count,
        imbalance_ratio=stats.imbalance_ratio,
    )
