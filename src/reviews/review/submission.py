"""SubmitReview — accept a new business review as PENDING.

Referenced business, location and reviewer must exist. When the directory
cannot answer, creation fails closed. Persisting the review raises
ReviewSubmitted, which the validation handler consumes asynchronously.
"""

import json

import structlog
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.directory import get_directory
from reviews.directory.port import DirectoryUnavailableError
from reviews.domain import reviews
from reviews.errors import ReviewError
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class SubmitReview:
    business_id = Identifier(required=True)
    location_id = Identifier()
    reviewer_id = Identifier()
    email = String(max_length=254)
    star_rating = Integer(required=True)
    review_body = Text(required=True)
    photo_urls = Text()  # JSON array of URLs
    review_as_anon = Boolean(default=False)

    # Request metadata
    ip_address = String(max_length=45)
    device_id = String(max_length=255)
    geolocation = String(max_length=255)
    user_agent = Text()


def _verify_references(command: SubmitReview) -> None:
    directory = get_directory()

    try:
        if not directory.business_exists(str(command.business_id)):
            raise ReviewError.not_found(f"Business {command.business_id} not found")

        if command.location_id and not directory.location_exists(str(command.location_id)):
            raise ReviewError.not_found(f"Location {command.location_id} not found")

        if command.reviewer_id and not directory.user_exists(str(command.reviewer_id)):
            raise ReviewError.not_found(f"User {command.reviewer_id} not found")
    except DirectoryUnavailableError as exc:
        logger.error(
            "Existence check unavailable, refusing review",
            business_id=str(command.business_id),
            error=str(exc),
        )
        raise ReviewError.unavailable("Unable to verify the reviewed business right now") from exc


@reviews.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        _verify_references(command)

        review = Review.submit(
            business_id=command.business_id,
            location_id=command.location_id,
            reviewer_id=command.reviewer_id,
            email=command.email,
            star_rating=command.star_rating,
            review_body=command.review_body,
            photo_urls=json.loads(command.photo_urls) if command.photo_urls else None,
            review_as_anon=command.review_as_anon,
            ip_address=command.ip_address,
            device_id=command.device_id,
            geolocation=command.geolocation,
            user_agent=command.user_agent,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "Review accepted as pending",
            review_id=str(review.id),
            business_id=str(command.business_id),
            guest=not command.reviewer_id,
        )
        return str(review.id)
