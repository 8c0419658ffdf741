"""HTTP adapter for the notification service."""

import requests
import structlog

from reviews.notifier.port import ReviewNotifier

logger = structlog.get_logger(__name__)


class HttpReviewNotifier(ReviewNotifier):
    def __init__(self, base_url: str, timeout: float, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, path: str, payload: dict) -> dict:
        try:
            response = self.session.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Notification request failed", path=path, review_id=payload["reviewId"], error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        if not response.ok:
            logger.warning(
                "Notification service returned error",
                path=path,
                review_id=payload["reviewId"],
                status_code=response.status_code,
            )
            return {"message_id": None, "status": "failed", "error": f"HTTP {response.status_code}"}

        return {"message_id": None, "status": "sent"}

    def send_review_approved(self, email: str, review_id: str) -> dict:
        return self._post("/api/notification/review-approved", {"email": email, "reviewId": review_id})

    def send_review_rejected(self, email: str, review_id: str, reasons: list[str]) -> dict:
        return self._post(
            "/api/notification/review-rejected",
            {"email": email, "reviewId": review_id, "reasons": list(reasons)},
        )

    def send_review_flagged(self, email: str, review_id: str) -> dict:
        return self._post("/api/notification/review-flagged", {"email": email, "reviewId": review_id})
