"""Compliance gateway port (abstract interface).

Defines the request sent to the compliance service, the verdict it returns,
and the contract every adapter implements. Adapters never raise to the
caller: any transport or parse failure degrades to ``ValidationVerdict.unavailable``,
which always rejects.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class VerdictRequest:
    """Everything the compliance rule engine scores a review on."""

    review_id: str
    business_id: str
    star_rating: int
    review_body: str
    is_guest_user: bool
    location_id: str | None = None
    reviewer_id: str | None = None
    email: str | None = None
    ip_address: str | None = None
    device_id: str | None = None
    geolocation: str | None = None
    user_agent: str | None = None

    def to_payload(self) -> dict:
        return {
            "reviewId": self.review_id,
            "businessId": self.business_id,
            "locationId": self.location_id,
            "reviewerId": self.reviewer_id,
            "email": self.email,
            "starRating": self.star_rating,
            "reviewBody": self.review_body,
            "ipAddress": self.ip_address,
            "deviceId": self.device_id,
            "geolocation": self.geolocation,
            "userAgent": self.user_agent,
            "isGuestUser": self.is_guest_user,
        }


def _string_list(values) -> tuple[str, ...]:
    if values is None:
        return ()
    if not isinstance(values, list):
        raise ValueError(f"Expected a list of strings, got {type(values).__name__}")
    return tuple(str(value) for value in values)


@dataclass(frozen=True)
class ValidationVerdict:
    """Structured result of a compliance check."""

    is_valid: bool
    level: int = 0
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    executed_rules: tuple[str, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def unavailable(cls, reason: str) -> "ValidationVerdict":
        """Synthetic verdict used whenever the gateway cannot produce a real one."""
        return cls(is_valid=False, level=0, errors=(reason,))

    @classmethod
    def from_payload(cls, payload: dict) -> "ValidationVerdict":
        """Parse the wire format. Raises ``ValueError`` on malformed input."""
        if not isinstance(payload, dict):
            raise ValueError("Verdict payload must be a JSON object")

        is_valid = payload.get("isValid")
        if not isinstance(is_valid, bool):
            raise ValueError("Verdict payload is missing a boolean 'isValid'")

        timestamp = payload.get("timestamp")
        if timestamp:
            parsed = datetime.fromisoformat(str(timestamp))
            timestamp = parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
        else:
            timestamp = datetime.now(UTC)

        return cls(
            is_valid=is_valid,
            level=int(payload.get("level") or 0),
            errors=_string_list(payload.get("errors")),
            warnings=_string_list(payload.get("warnings")),
            executed_rules=_string_list(payload.get("executedRules")),
            timestamp=timestamp,
        )

    def to_payload(self) -> dict:
        return {
            "isValid": self.is_valid,
            "level": self.level,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "executedRules": list(self.executed_rules),
            "timestamp": self.timestamp.isoformat(),
        }


class ComplianceGateway(ABC):
    """Abstract compliance gateway interface."""

    @abstractmethod
    def validate_review(self, request: VerdictRequest) -> ValidationVerdict:
        """Score a single review. Must not raise."""
        ...
