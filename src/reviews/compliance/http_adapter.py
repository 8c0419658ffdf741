"""HTTP adapter for the external compliance service.

POSTs the verdict request to ``/api/compliance/validate-review``. Every
failure mode maps to its own synthetic invalid verdict so the rejection
reason stored on the review identifies the outage.
"""

import requests
import structlog

from reviews.compliance.port import ComplianceGateway, ValidationVerdict, VerdictRequest

logger = structlog.get_logger(__name__)

VALIDATE_PATH = "/api/compliance/validate-review"


class HttpComplianceGateway(ComplianceGateway):
    def __init__(self, base_url: str, timeout: float, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def validate_review(self, request: VerdictRequest) -> ValidationVerdict:
        logger.info("Calling compliance service", review_id=request.review_id)

        try:
            response = self.session.post(
                f"{self.base_url}{VALIDATE_PATH}",
                json=request.to_payload(),
                timeout=self.timeout,
            )
        except requests.Timeout:
            logger.error("Compliance service timed out", review_id=request.review_id, timeout=self.timeout)
            return ValidationVerdict.unavailable("Validation service timed out")
        except requests.RequestException as exc:
            logger.error("Network error calling compliance service", review_id=request.review_id, error=str(exc))
            return ValidationVerdict.unavailable("Network error contacting validation service")
        except Exception as exc:
            logger.exception("Unexpected error calling compliance service", review_id=request.review_id)
            return ValidationVerdict.unavailable(f"Unexpected validation error: {type(exc).__name__}")

        if not response.ok:
            logger.error(
                "Compliance service returned error",
                review_id=request.review_id,
                status_code=response.status_code,
            )
            return ValidationVerdict.unavailable("Validation service unavailable")

        try:
            verdict = ValidationVerdict.from_payload(response.json())
        except ValueError as exc:
            # requests' JSONDecodeError is a ValueError too
            logger.error("Invalid verdict from compliance service", review_id=request.review_id, error=str(exc))
            return ValidationVerdict.unavailable("Invalid validation response")

        logger.info(
            "Compliance verdict received",
            review_id=request.review_id,
            is_valid=verdict.is_valid,
            level=verdict.level,
        )
        return verdict
