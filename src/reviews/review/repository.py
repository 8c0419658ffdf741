"""Review store queries, including the abuse signals used by compliance.

Every abuse query looks at settled reviews only (APPROVED, REJECTED,
FLAGGED) created within a sliding window ending now. Identity matching is
disjunctive: a review counts if it shares the reviewer id, the email
(case-insensitive), the IP address or the device id with the caller's
identity. Channels the caller leaves out never match.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from protean.utils.globals import current_domain
from protean.utils.query import Q

from reviews.config import get_settings
from reviews.domain import reviews
from reviews.projections.business_categories import BusinessCategories, category_key
from reviews.review.review import SETTLED_STATUSES, Review, ReviewStatus


@dataclass(frozen=True)
class ReviewerIdentity:
    """The identity tuple used to correlate submissions from one actor."""

    reviewer_id: str | None = None
    email: str | None = None
    ip_address: str | None = None
    device_id: str | None = None

    def is_empty(self) -> bool:
        return not (self.reviewer_id or self.email or self.ip_address or self.device_id)

    def as_filter(self) -> Q | None:
        """OR of the supplied channels, or None when no channel is supplied."""
        if self.is_empty():
            return None

        clauses = []
        if self.reviewer_id:
            clauses.append(Q(reviewer_id=str(self.reviewer_id)))
        if self.email:
            clauses.append(Q(email__iexact=self.email))
        if self.ip_address:
            clauses.append(Q(ip_address=self.ip_address))
        if self.device_id:
            clauses.append(Q(device_id=self.device_id))

        combined = clauses[0]
        for clause in clauses[1:]:
            combined = combined | clause
        return combined


@dataclass(frozen=True)
class ReviewStats:
    """Rating distribution of a business's settled reviews within a window."""

    total_reviews: int
    positive_count: int
    negative_count: int
    imbalance_ratio: float

    @classmethod
    def from_counts(cls, total: int, positive: int, negative: int) -> "ReviewStats":
        if total == 0:
            return cls(total_reviews=0, positive_count=0, negative_count=0, imbalance_ratio=0.0)

        return cls(
            total_reviews=total,
            positive_count=positive,
            negative_count=negative,
            imbalance_ratio=abs(positive / total - negative / total),
        )


@reviews.repository(part_of=Review)
class ReviewRepository:
    def approved_for_business(self, business_id: str) -> list[Review]:
        """Public listing: APPROVED reviews of a business, newest first."""
        return (
            self._dao.query.filter(business_id=str(business_id), status=ReviewStatus.APPROVED.value)
            .order_by("-created_at")
            .limit(get_settings().listing_limit)
            .all()
            .items
        )

    def _settled_within(self, window: timedelta, *criteria, **filters):
        """Settled reviews created in ``[now - window, now]``, narrowed by ``criteria`` and ``filters``."""
        since = datetime.now(UTC) - window
        return self._dao.query.filter(
            *criteria,
            status__in=[status.value for status in SETTLED_STATUSES],
            created_at__gte=since,
            **filters,
        )

    def has_recent_settled_review(self, business_id: str, identity: ReviewerIdentity, window: timedelta) -> bool:
        """Duplicate signal: same actor already reviewed this business within the window."""
        match = identity.as_filter()
        if match is None:
            return False
        return self._settled_within(window, match, business_id=str(business_id)).all().total > 0

    def count_recent_settled_reviews(self, identity: ReviewerIdentity, window: timedelta) -> int:
        """Frequency signal: settled reviews by this actor across all businesses."""
        match = identity.as_filter()
        if match is None:
            return 0
        return self._settled_within(window, match).all().total

    def has_settled_review_in_category(self, identity: ReviewerIdentity, category: str, window: timedelta) -> bool:
        """Category signal: this actor reviewed any business tagged with ``category``."""
        match = identity.as_filter()
        if match is None:
            return False

        # Scan the actor's own reviews, newest first
        reviewed = (
            self._settled_within(window, match).order_by("-created_at").limit(get_settings().abuse_scan_limit).all()
        )
        business_ids = sorted({str(review.business_id) for review in reviewed.items})
        if not business_ids:
            return False

        tagged = (
            current_domain.repository_for(BusinessCategories)
            ._dao.query.filter(category=category_key(category), business_id__in=business_ids)
            .all()
        )
        return tagged.total > 0

    def review_stats(self, business_id: str, window: timedelta) -> ReviewStats:
        """Spike signal: rating distribution of the business's settled reviews."""
        business = str(business_id)
        return ReviewStats.from_counts(
            total=self._settled_within(window, business_id=business).all().total,
            positive=self._settled_within(window, business_id=business, star_rating__gte=4).all().total,
            negative=self._settled_within(window, business_id=business, star_rating__lte=2).all().total,
        )
