"""Application tests for the inbound BusinessCategoriesUpdated handler."""

import json
from datetime import UTC, datetime

from protean import current_domain
from reviews.projections.business_categories import BusinessCategories
from reviews.review.directory_events import DirectoryEventsHandler
from shared.events.directory import BusinessCategoriesUpdated


def _publish(business_id, categories):
    DirectoryEventsHandler().on_business_categories_updated(
        BusinessCategoriesUpdated(
            business_id=business_id,
            categories=json.dumps(categories),
            updated_at=datetime.now(UTC),
        )
    )


def _categories(business_id):
    entries = (
        current_domain.repository_for(BusinessCategories)._dao.query.filter(business_id=business_id).all().items
    )
    return sorted(entry.category for entry in entries)


class TestBusinessCategoriesUpdated:
    def test_creates_one_row_per_category(self):
        _publish("biz-001", ["Restaurant", "Bar"])
        assert _categories("biz-001") == ["bar", "restaurant"]

    def test_replaces_previous_categories(self):
        _publish("biz-001", ["Restaurant", "Bar"])
        _publish("biz-001", ["Cafe"])
        assert _categories("biz-001") == ["cafe"]

    def test_duplicates_and_blanks_collapse(self):
        _publish("biz-001", ["Cafe", " cafe ", "", "CAFE"])
        assert _categories("biz-001") == ["cafe"]

    def test_other_businesses_untouched(self):
        _publish("biz-001", ["Cafe"])
        _publish("biz-002", ["Hotel"])
        _publish("biz-001", [])

        assert _categories("biz-001") == []
        assert _categories("biz-002") == ["hotel"]
