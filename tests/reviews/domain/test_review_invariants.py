"""Tests for Review aggregate content rules."""

import pytest
from protean.exceptions import ValidationError
from reviews.review.review import Review, ReviewStatus


def _make_review(**overrides):
    defaults = {
        "business_id": "biz-001",
        "email": "guest@example.com",
        "star_rating": 4,
        "review_body": "Friendly staff and the coffee was excellent.",
    }
    defaults.update(overrides)
    return Review.submit(**defaults)


class TestStarRating:
    @pytest.mark.parametrize("rating", [1, 5])
    def test_bounds_accepted(self, rating):
        assert _make_review(star_rating=rating).star_rating == rating

    @pytest.mark.parametrize("rating", [0, 6])
    def test_out_of_range_rejected(self, rating):
        with pytest.raises(ValidationError) as exc:
            _make_review(star_rating=rating)
        assert "Star rating must be between 1 and 5" in str(exc.value)


class TestReviewBody:
    def test_20_characters_accepted(self):
        assert len(_make_review(review_body="a" * 20).review_body) == 20

    def test_500_characters_accepted(self):
        assert len(_make_review(review_body="a" * 500).review_body) == 500

    def test_19_characters_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(review_body="a" * 19)
        assert "Review body must be between 20 and 500 characters" in str(exc.value)

    def test_501_characters_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(review_body="a" * 501)

    def test_whitespace_only_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(review_body=" " * 40)


class TestPhotos:
    def test_three_photos_accepted(self):
        review = _make_review(photo_urls=[f"https://cdn.example.com/{i}.jpg" for i in range(3)])
        assert len(review.photo_list()) == 3

    def test_fourth_photo_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(photo_urls=[f"https://cdn.example.com/{i}.jpg" for i in range(4)])
        assert "Maximum 3 photos allowed" in str(exc.value)

    def test_no_photos_is_empty_list(self):
        assert _make_review().photo_list() == []


class TestReviewerIdentity:
    def test_guest_requires_email(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(email=None)
        assert "Email is required for guest reviews" in str(exc.value)

    def test_guest_blank_email_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(email="   ")

    def test_registered_reviewer_without_email_allowed(self):
        review = _make_review(reviewer_id="user-001", email=None)
        assert review.email is None
        assert str(review.reviewer_id) == "user-001"


class TestSubmission:
    def test_new_review_is_pending(self):
        review = _make_review()
        assert review.status == ReviewStatus.PENDING.value
        assert review.validated_at is None
        assert review.validation_result is None
        assert review.created_at is not None

    def test_metadata_captured(self):
        review = _make_review(
            ip_address="203.0.113.7",
            device_id="device-1",
            geolocation="52.52,13.40",
            user_agent="Mozilla/5.0",
        )
        assert review.ip_address == "203.0.113.7"
        assert review.device_id == "device-1"
        assert review.geolocation == "52.52,13.40"
        assert review.user_agent == "Mozilla/5.0"
