"""Owner authorization for review edits and deletions.

A caller owns a review when the reviewer id they present matches the
stored one, or the email they present matches the stored one
case-insensitively. Presenting neither is never enough.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from reviews.errors import ReviewError
from reviews.review.review import Review


def load_owned_review(review_id: str, reviewer_id: str | None = None, email: str | None = None) -> Review:
    """Fetch a review for mutation by its owner.

    Raises ReviewError NOT_FOUND when the review does not exist and
    FORBIDDEN when the caller is not its owner.
    """
    try:
        review = current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        raise ReviewError.not_found(f"Review {review_id} not found") from None

    if not (reviewer_id or email):
        raise ReviewError.forbidden("A reviewer id or email is required to modify a review")

    if not review.is_owned_by(reviewer_id=reviewer_id, email=email):
        raise ReviewError.forbidden(f"Not allowed to modify review {review_id}")

    return review
