"""Reviews domain API package."""

from reviews.api.events import event_router
from reviews.api.internal import internal_router
from reviews.api.routes import review_router

__all__ = ["review_router", "internal_router", "event_router"]
