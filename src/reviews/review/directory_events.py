"""Inbound cross-domain event handler — Reviews reacts to Directory events.

Keeps the BusinessCategories projection in step with the Directory, so the
category abuse query never has to call out.
"""

import json

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.directory import BusinessCategoriesUpdated

from reviews.domain import reviews
from reviews.projections.business_categories import BusinessCategories, category_key
from reviews.review.review import Review

logger = structlog.get_logger(__name__)

reviews.register_external_event(BusinessCategoriesUpdated, "Directory.BusinessCategoriesUpdated.v1")


@reviews.event_handler(part_of=Review, stream_category="directory::business")
class DirectoryEventsHandler:
    @handle(BusinessCategoriesUpdated)
    def on_business_categories_updated(self, event: BusinessCategoriesUpdated) -> None:
        """Replace every category row of the business with the new list."""
        business_id = str(event.business_id)
        repo = current_domain.repository_for(BusinessCategories)

        for entry in repo._dao.query.filter(business_id=business_id).all().items:
            repo._dao.delete(entry)

        raw = json.loads(event.categories) if event.categories else []
        keys = sorted({category_key(name) for name in raw if isinstance(name, str) and name.strip()})

        for key in keys:
            repo.add(
                BusinessCategories(
                    entry_id=f"{business_id}:{key}",
                    business_id=business_id,
                    category=key,
                    updated_at=event.updated_at,
                )
            )

        logger.info("Business categories replaced", business_id=business_id, categories=keys)
