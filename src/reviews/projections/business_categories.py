"""BusinessCategories — which categories each reviewed business belongs to.

One row per (business, category) pair. Populated by the directory
cross-domain event handler and read by the category abuse check.
"""

from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews


def category_key(category: str) -> str:
    return category.strip().casefold()


@reviews.projection
class BusinessCategories:
    entry_id = Identifier(identifier=True, required=True)
    business_id = String(required=True)
    category = String(required=True, max_length=100)
    updated_at = DateTime()
