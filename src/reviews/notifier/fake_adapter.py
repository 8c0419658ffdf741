"""Fake notifier that records notifications in memory for test assertions."""

from uuid import uuid4

from reviews.notifier.port import ReviewNotifier


class FakeReviewNotifier(ReviewNotifier):
    def __init__(self):
        self.sent: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def _record(self, kind: str, email: str, review_id: str, reasons: list[str] | None = None) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"notice-{uuid4().hex[:12]}"
        self.sent.append(
            {
                "message_id": message_id,
                "kind": kind,
                "email": email,
                "review_id": review_id,
                "reasons": list(reasons) if reasons is not None else None,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def send_review_approved(self, email: str, review_id: str) -> dict:
        return self._record("approved", email, review_id)

    def send_review_rejected(self, email: str, review_id: str, reasons: list[str]) -> dict:
        return self._record("rejected", email, review_id, reasons)

    def send_review_flagged(self, email: str, review_id: str) -> dict:
        return self._record("flagged", email, review_id)

    def reset(self):
        """Clear recorded notifications (useful between tests)."""
        self.sent.clear()
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
