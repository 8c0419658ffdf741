"""DeleteReview — the owner deletes their review.

Same ownership rule as editing. A validation still in flight for a deleted
review finds nothing to settle and stops.
"""

import structlog
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.ownership import load_owned_review
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)
    reviewer_id = Identifier()
    email = String(max_length=254)


@reviews.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        review = load_owned_review(
            str(command.review_id),
            reviewer_id=command.reviewer_id,
            email=command.email,
        )

        current_domain.repository_for(Review)._dao.delete(review)
        logger.info("Review deleted", review_id=str(command.review_id), status=review.status)
