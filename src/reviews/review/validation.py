"""Validation orchestrator — settles a pending review from its compliance verdict.

Consumes ReviewSubmitted. For each submission it:

1. Skips when the review is gone (deleted while in flight) or already
   settled (redelivered event).
2. Builds a verdict request from the submitted content and metadata.
3. Asks the compliance gateway for a verdict. Any failure becomes the
   synthetic "unavailable" verdict, which rejects.
4. Re-loads the review and settles it. The settlement raises
   ReviewApproved, ReviewRejected or ReviewFlagged, which drive the
   submitter notification.

Store errors propagate so that the event is retried.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.compliance import get_gateway
from reviews.compliance.port import ValidationVerdict, VerdictRequest
from reviews.domain import reviews
from reviews.review.events import ReviewSubmitted
from reviews.review.review import Review
from reviews.utils.logging import review_context

logger = structlog.get_logger(__name__)


def verdict_request_from(event: ReviewSubmitted) -> VerdictRequest:
    return VerdictRequest(
        review_id=str(event.review_id),
        business_id=str(event.business_id),
        location_id=str(event.location_id) if event.location_id else None,
        reviewer_id=str(event.reviewer_id) if event.reviewer_id else None,
        email=event.email,
        star_rating=event.star_rating,
        review_body=event.review_body,
        ip_address=event.ip_address,
        device_id=event.device_id,
        geolocation=event.geolocation,
        user_agent=event.user_agent,
        is_guest_user=not event.reviewer_id,
    )


def request_verdict(request: VerdictRequest) -> ValidationVerdict:
    """Call the configured gateway. Never raises."""
    try:
        return get_gateway().validate_review(request)
    except Exception as exc:
        logger.exception("Compliance gateway raised", review_id=request.review_id)
        return ValidationVerdict.unavailable(f"Unexpected validation error: {type(exc).__name__}")


def _find(review_id: str) -> Review | None:
    try:
        return current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        return None


def validate_submitted_review(event: ReviewSubmitted) -> str | None:
    """Run one validation pass. Returns the settled status, or None when skipped."""
    review_id = str(event.review_id)
    with review_context(review_id):
        return _settle_once(review_id, event)


def _settle_once(review_id: str, event: ReviewSubmitted) -> str | None:
    review = _find(review_id)
    if review is None:
        logger.info("Review no longer exists, skipping validation")
        return None
    if review.is_settled():
        logger.info("Review already settled, skipping validation", status=review.status)
        return None

    verdict = request_verdict(verdict_request_from(event))

    # The review may have been deleted or settled while the gateway was busy
    review = _find(review_id)
    if review is None:
        logger.info("Review deleted during validation, dropping verdict")
        return None
    if review.is_settled():
        logger.info("Review settled concurrently, dropping verdict")
        return None

    status = review.settle(verdict)
    current_domain.repository_for(Review).add(review)

    logger.info(
        "Review settled",
        status=status.value,
        errors=list(verdict.errors),
        warnings=list(verdict.warnings),
    )
    return status.value


@reviews.event_handler(part_of=Review)
class ReviewValidationHandler:
    """Settles each submitted review exactly once."""

    @handle(ReviewSubmitted)
    def on_review_submitted(self, event: ReviewSubmitted) -> None:
        validate_submitted_review(event)
