"""Review aggregate (CQRS) — the core of the Reviews domain.

A review is accepted as PENDING and settled exactly once by the validation
orchestrator, based on the compliance verdict.

State Machine (4 states):
    PENDING → APPROVED | REJECTED | FLAGGED
    APPROVED, REJECTED, FLAGGED → (terminal)

Only settled reviews count towards abuse signals. Only APPROVED reviews are
publicly listed.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from reviews.compliance.port import ValidationVerdict
from reviews.domain import reviews
from reviews.review.events import (
    ReviewApproved,
    ReviewEdited,
    ReviewFlagged,
    ReviewRejected,
    ReviewSubmitted,
)

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

MIN_BODY_LENGTH = 20
MAX_BODY_LENGTH = 500
MAX_PHOTOS = 3


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ReviewStatus(Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    FLAGGED = "FLAGGED"


SETTLED_STATUSES = frozenset({ReviewStatus.APPROVED, ReviewStatus.REJECTED, ReviewStatus.FLAGGED})


def status_for_verdict(verdict: ValidationVerdict) -> ReviewStatus:
    """Map a compliance verdict to the status a pending review settles into.

    Invalid wins over warnings: an invalid verdict rejects regardless of
    what else it carries.
    """
    if not verdict.is_valid:
        return ReviewStatus.REJECTED
    if verdict.warnings:
        return ReviewStatus.FLAGGED
    return ReviewStatus.APPROVED


def _encode_photos(photo_urls):
    return json.dumps(list(photo_urls)) if photo_urls else None


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A review of a business, by a registered user or a guest."""

    # Associations
    business_id = Identifier(required=True)
    location_id = Identifier()
    reviewer_id = Identifier()
    email = String(max_length=254)

    # Content
    star_rating = Integer(required=True)
    review_body = Text(required=True)
    photo_urls = Text()  # JSON array of URLs
    review_as_anon = Boolean(default=False)

    # Submission metadata, captured once
    ip_address = String(max_length=45)
    device_id = String(max_length=255)
    geolocation = String(max_length=255)
    user_agent = Text()

    # Lifecycle
    status = String(choices=ReviewStatus, default=ReviewStatus.PENDING.value)
    validation_result = Text()  # JSON verdict
    validated_at = DateTime()

    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def star_rating_must_be_in_range(self):
        if self.star_rating is not None and not 1 <= self.star_rating <= 5:
            raise ValidationError({"star_rating": ["Star rating must be between 1 and 5"]})

    @invariant.post
    def review_body_length(self):
        if self.review_body is None:
            return
        if not self.review_body.strip() or not MIN_BODY_LENGTH <= len(self.review_body) <= MAX_BODY_LENGTH:
            raise ValidationError(
                {"review_body": [f"Review body must be between {MIN_BODY_LENGTH} and {MAX_BODY_LENGTH} characters"]}
            )

    @invariant.post
    def photos_cannot_exceed_maximum(self):
        if len(self.photo_list()) > MAX_PHOTOS:
            raise ValidationError({"photo_urls": [f"Maximum {MAX_PHOTOS} photos allowed"]})

    @invariant.post
    def guest_reviews_need_an_email(self):
        if not self.reviewer_id and not (self.email and self.email.strip()):
            raise ValidationError({"email": ["Email is required for guest reviews"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(
        cls,
        business_id,
        star_rating,
        review_body,
        location_id=None,
        reviewer_id=None,
        email=None,
        photo_urls=None,
        review_as_anon=False,
        ip_address=None,
        device_id=None,
        geolocation=None,
        user_agent=None,
    ):
        """Accept a new review as PENDING."""
        now = datetime.now(UTC)
        photos = _encode_photos(photo_urls)

        review = cls(
            business_id=business_id,
            location_id=location_id,
            reviewer_id=reviewer_id,
            email=email,
            star_rating=star_rating,
            review_body=review_body,
            photo_urls=photos,
            review_as_anon=bool(review_as_anon),
            ip_address=ip_address,
            device_id=device_id,
            geolocation=geolocation,
            user_agent=user_agent,
            status=ReviewStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                business_id=str(business_id),
                location_id=str(location_id) if location_id else None,
                reviewer_id=str(reviewer_id) if reviewer_id else None,
                email=email,
                star_rating=star_rating,
                review_body=review_body,
                photo_urls=photos,
                review_as_anon=bool(review_as_anon),
                ip_address=ip_address,
                device_id=device_id,
                geolocation=geolocation,
                user_agent=user_agent,
                created_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Queries on state
    # -------------------------------------------------------------------
    def photo_list(self) -> list[str]:
        return json.loads(self.photo_urls) if self.photo_urls else []

    def verdict(self) -> dict | None:
        return json.loads(self.validation_result) if self.validation_result else None

    def is_settled(self) -> bool:
        return ReviewStatus(self.status) in SETTLED_STATUSES

    def is_owned_by(self, reviewer_id=None, email=None) -> bool:
        """True if the caller's reviewer id matches, or their email matches case-insensitively."""
        if reviewer_id and self.reviewer_id and str(self.reviewer_id) == str(reviewer_id):
            return True
        if email and self.email and self.email.casefold() == email.casefold():
            return True
        return False

    # -------------------------------------------------------------------
    # Edit
    # -------------------------------------------------------------------
    def edit(
        self,
        star_rating=_UNSET,
        review_body=_UNSET,
        photo_urls=_UNSET,
        review_as_anon=_UNSET,
    ):
        """Apply the supplied content edits. Settlement status is not reset."""
        now = datetime.now(UTC)

        with atomic_change(self):
            if star_rating is not _UNSET:
                self.star_rating = star_rating
            if review_body is not _UNSET:
                self.review_body = review_body
            if photo_urls is not _UNSET:
                self.photo_urls = _encode_photos(photo_urls)
            if review_as_anon is not _UNSET:
                self.review_as_anon = bool(review_as_anon)
            self.updated_at = now

        self.raise_(
            ReviewEdited(
                review_id=str(self.id),
                star_rating=self.star_rating,
                review_body=self.review_body,
                photo_urls=self.photo_urls,
                review_as_anon=self.review_as_anon,
                edited_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Settlement
    # -------------------------------------------------------------------
    def settle(self, verdict: ValidationVerdict) -> ReviewStatus:
        """Record the compliance verdict and move out of PENDING, once."""
        current = ReviewStatus(self.status)
        if current != ReviewStatus.PENDING:
            raise ValidationError({"status": [f"Review is already settled as {current.value}"]})

        new_status = status_for_verdict(verdict)
        now = datetime.now(UTC)

        with atomic_change(self):
            self.status = new_status.value
            self.validation_result = json.dumps(verdict.to_payload())
            self.validated_at = now
            self.updated_at = now

        self.raise_(self._settlement_event(new_status, verdict, now))
        return new_status

    def _settlement_event(self, status: ReviewStatus, verdict: ValidationVerdict, validated_at: datetime):
        if status == ReviewStatus.APPROVED:
            return ReviewApproved(
                review_id=str(self.id),
                business_id=str(self.business_id),
                email=self.email,
                star_rating=self.star_rating,
                validated_at=validated_at,
            )
        if status == ReviewStatus.REJECTED:
            return ReviewRejected(
                review_id=str(self.id),
                business_id=str(self.business_id),
                email=self.email,
                errors=json.dumps(list(verdict.errors)),
                validated_at=validated_at,
            )
        if status == ReviewStatus.FLAGGED:
            return ReviewFlagged(
                review_id=str(self.id),
                business_id=str(self.business_id),
                email=self.email,
                warnings=json.dumps(list(verdict.warnings)),
                validated_at=validated_at,
            )
        raise ValueError(f"{status.value} is not a settled status")
