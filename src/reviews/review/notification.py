"""Submitter notification on settlement.

Reacts to the settlement events, so a notification only goes out once the
new status is committed. Delivery failures are logged and dropped; they
never affect the review.
"""

import json

import structlog
from protean.utils.mixins import handle

from reviews.config import get_settings
from reviews.domain import reviews
from reviews.notifier import get_notifier
from reviews.review.events import ReviewApproved, ReviewFlagged, ReviewRejected
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


def _recipient(email: str | None) -> str:
    return email or get_settings().notification_fallback_email


def _deliver(kind: str, review_id: str, send) -> None:
    try:
        result = send(get_notifier())
    except Exception:
        logger.exception("Review notification raised", kind=kind, review_id=review_id)
        return

    if result.get("status") != "sent":
        logger.warning(
            "Review notification not delivered",
            kind=kind,
            review_id=review_id,
            error=result.get("error"),
        )
        return

    logger.info("Review notification sent", kind=kind, review_id=review_id, message_id=result.get("message_id"))


@reviews.event_handler(part_of=Review)
class SettlementNotificationHandler:
    @handle(ReviewApproved)
    def on_review_approved(self, event: ReviewApproved) -> None:
        review_id = str(event.review_id)
        _deliver("approved", review_id, lambda n: n.send_review_approved(_recipient(event.email), review_id))

    @handle(ReviewRejected)
    def on_review_rejected(self, event: ReviewRejected) -> None:
        review_id = str(event.review_id)
        reasons = json.loads(event.errors) if event.errors else []
        _deliver("rejected", review_id, lambda n: n.send_review_rejected(_recipient(event.email), review_id, reasons))

    @handle(ReviewFlagged)
    def on_review_flagged(self, event: ReviewFlagged) -> None:
        review_id = str(event.review_id)
        _deliver("flagged", review_id, lambda n: n.send_review_flagged(_recipient(event.email), review_id))
