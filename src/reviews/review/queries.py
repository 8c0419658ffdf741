"""Read paths over the Review store: single review, public listing, status polling."""

from dataclasses import dataclass
from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from reviews.errors import ReviewError
from reviews.review.review import Review


@dataclass(frozen=True)
class ReviewStatusView:
    review_id: str
    status: str
    validated_at: datetime | None
    validation_result: dict | None


def get_review(review_id: str) -> Review:
    try:
        return current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        raise ReviewError.not_found(f"Review {review_id} not found") from None


def list_approved_for_business(business_id: str) -> list[Review]:
    """APPROVED reviews only, newest first. Never leaks unsettled or rejected content."""
    return current_domain.repository_for(Review).approved_for_business(business_id)


def get_review_status(review_id: str, email: str | None) -> ReviewStatusView:
    """Status projection for the submitter.

    A wrong or missing email is indistinguishable from a missing review so
    that ids cannot be probed.
    """
    try:
        review = current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        review = None

    if review is None or not email or not review.email or review.email.casefold() != email.casefold():
        raise ReviewError.not_found("Review not found")

    return ReviewStatusView(
        review_id=str(review.id),
        status=review.status,
        validated_at=review.validated_at,
        validation_result=review.verdict(),
    )
