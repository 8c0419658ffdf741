"""Domain events for the Review aggregate.

ReviewSubmitted carries the full review payload plus request metadata and
drives asynchronous validation. The three settlement events drive the
outcome notifications.
"""

from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSubmitted:
    """A review was accepted and stored as PENDING."""

    __version__ = 1

    review_id = Identifier(required=True)
    business_id = Identifier(required=True)
    location_id = Identifier()
    reviewer_id = Identifier()
    email = String(max_length=254)
    star_rating = Integer(required=True)
    review_body = Text(required=True)
    photo_urls = Text()  # JSON array of URLs
    review_as_anon = Boolean(default=False)
    ip_address = String(max_length=45)
    device_id = String(max_length=255)
    geolocation = String(max_length=255)
    user_agent = Text()
    created_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewEdited:
    """The owner edited review content. Status is left untouched."""

    __version__ = 1

    review_id = Identifier(required=True)
    star_rating = Integer()
    review_body = Text()
    photo_urls = Text()
    review_as_anon = Boolean()
    edited_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewApproved:
    """Compliance found no errors and no warnings; the review is public."""

    __version__ = 1

    review_id = Identifier(required=True)
    business_id = Identifier(required=True)
    email = String(max_length=254)
    star_rating = Integer(required=True)
    validated_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewRejected:
    """Compliance judged the review invalid (or could not be reached)."""

    __version__ = 1

    review_id = Identifier(required=True)
    business_id = Identifier(required=True)
    email = String(max_length=254)
    errors = Text()  # JSON array of reasons
    validated_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewFlagged:
    """Compliance passed the review with warnings; held for manual review."""

    __version__ = 1

    review_id = Identifier(required=True)
    business_id = Identifier(required=True)
    email = String(max_length=254)
    warnings = Text()  # JSON array of warnings
    validated_at = DateTime(required=True)
