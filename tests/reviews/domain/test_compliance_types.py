"""Tests for the compliance verdict wire format and abuse value types."""

import pytest
from protean.utils.query import Q
from reviews.compliance.port import ValidationVerdict, VerdictRequest
from reviews.review.repository import ReviewerIdentity, ReviewStats


class TestVerdictFromPayload:
    def test_parses_full_payload(self):
        verdict = ValidationVerdict.from_payload(
            {
                "isValid": True,
                "level": 2,
                "errors": [],
                "warnings": ["new account"],
                "executedRules": ["DuplicateRule", "FrequencyRule"],
                "timestamp": "2026-03-01T10:00:00+00:00",
            }
        )
        assert verdict.is_valid is True
        assert verdict.level == 2
        assert verdict.warnings == ("new account",)
        assert verdict.executed_rules == ("DuplicateRule", "FrequencyRule")
        assert verdict.timestamp.year == 2026

    def test_missing_is_valid_rejected(self):
        with pytest.raises(ValueError):
            ValidationVerdict.from_payload({"errors": []})

    def test_non_boolean_is_valid_rejected(self):
        with pytest.raises(ValueError):
            ValidationVerdict.from_payload({"isValid": "yes"})

    def test_non_object_rejected(self):
        with pytest.raises(ValueError):
            ValidationVerdict.from_payload(["isValid"])


class TestUnavailableVerdict:
    def test_is_invalid_level_zero(self):
        verdict = ValidationVerdict.unavailable("Validation service timed out")
        assert verdict.is_valid is False
        assert verdict.level == 0
        assert verdict.errors == ("Validation service timed out",)
        assert verdict.warnings == ()


class TestVerdictRequestPayload:
    def test_camel_case_keys(self):
        payload = VerdictRequest(
            review_id="r-1",
            business_id="b-1",
            star_rating=5,
            review_body="A wonderful place for brunch with friends.",
            is_guest_user=True,
            email="guest@example.com",
            device_id="dev-9",
        ).to_payload()

        assert payload["reviewId"] == "r-1"
        assert payload["isGuestUser"] is True
        assert payload["deviceId"] == "dev-9"
        assert payload["reviewerId"] is None


class TestReviewStats:
    def test_mixed_ratings(self):
        # Ratings 5, 5, 4, 2, 1
        stats = ReviewStats.from_counts(total=5, positive=3, negative=2)
        assert stats.total_reviews == 5
        assert stats.positive_count == 3
        assert stats.negative_count == 2
        assert stats.imbalance_ratio == pytest.approx(0.2)

    def test_neutral_ratings_count_towards_total_only(self):
        # Ratings 3, 3, 5
        stats = ReviewStats.from_counts(total=3, positive=1, negative=0)
        assert stats.imbalance_ratio == pytest.approx(1 / 3)

    def test_empty(self):
        stats = ReviewStats.from_counts(total=0, positive=0, negative=0)
        assert stats.total_reviews == 0
        assert stats.imbalance_ratio == 0.0


class TestReviewerIdentity:
    def test_empty_identity(self):
        assert ReviewerIdentity().is_empty() is True
        assert ReviewerIdentity().as_filter() is None

    @pytest.mark.parametrize(
        "identity",
        [
            ReviewerIdentity(reviewer_id="user-001"),
            ReviewerIdentity(email="someone@example.com"),
            ReviewerIdentity(ip_address="192.0.2.10"),
            ReviewerIdentity(device_id="dev-1"),
            ReviewerIdentity(reviewer_id="user-999", email="x@example.com", ip_address="192.0.2.99", device_id="dev-1"),
        ],
    )
    def test_any_supplied_channel_builds_a_filter(self, identity):
        assert identity.is_empty() is False
        assert isinstance(identity.as_filter(), Q)
