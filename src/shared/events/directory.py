"""Cross-domain event contracts published by the business Directory.

Registered as external events via domain.register_external_event() with
matching __type__ strings so Protean's stream deserialization works.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, Text


class BusinessCategoriesUpdated(BaseEvent):
    """The full category list of a business was replaced.

    Consumed by the Reviews domain to answer category-based abuse queries.
    """

    __version__ = 1

    business_id = Identifier(required=True)
    categories = Text(required=True)  # JSON list of category names
    updated_at = DateTime(required=True)
