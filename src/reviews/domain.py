"""Reviews bounded context — business reviews with asynchronous compliance validation.

Reviews are accepted as PENDING, validated out of band by the compliance
service, and settled into APPROVED, REJECTED or FLAGGED. Settled reviews feed
the abuse signals (duplicates, frequency, category, rating spikes) that the
compliance rule engine queries back through the internal API.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

reviews = Domain(name="reviews")
