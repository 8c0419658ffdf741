"""EditReview — the owner edits review content.

Only the supplied fields change, each re-validated against the creation
rules. The review keeps its current status: editing a settled review does
not send it back through validation.
"""

import json

import structlog
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.ownership import load_owned_review
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class EditReview:
    review_id = Identifier(required=True)

    # Owner identity, one of the two must match
    reviewer_id = Identifier()
    email = String(max_length=254)

    star_rating = Integer()
    review_body = Text()
    photo_urls = Text()  # JSON array of URLs
    review_as_anon = Boolean()


@reviews.command_handler(part_of=Review)
class EditReviewHandler:
    @handle(EditReview)
    def edit_review(self, command):
        review = load_owned_review(
            str(command.review_id),
            reviewer_id=command.reviewer_id,
            email=command.email,
        )

        kwargs = {}
        if command.star_rating is not None:
            kwargs["star_rating"] = command.star_rating
        if command.review_body is not None:
            kwargs["review_body"] = command.review_body
        if command.photo_urls is not None:
            kwargs["photo_urls"] = json.loads(command.photo_urls)
        if command.review_as_anon is not None:
            kwargs["review_as_anon"] = command.review_as_anon

        review.edit(**kwargs)
        current_domain.repository_for(Review).add(review)

        logger.info("Review edited", review_id=str(review.id), fields=sorted(kwargs), status=review.status)
        return str(review.id)
