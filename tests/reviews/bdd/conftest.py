"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from reviews.review.review import Review

REVIEW_BODY = "A perfectly ordinary review body for scenarios."


@pytest.fixture()
def outcome():
    """Container for the submitted review id or the captured error."""
    return {"review_id": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the business "{business_id}" exists'))
def business_exists(directory, business_id):
    directory.missing_businesses.discard(business_id)


@given(parsers.cfparse('the business "{business_id}" does not exist'))
def business_missing(directory, business_id):
    directory.mark_business_missing(business_id)


@given("the directory is unreachable")
def directory_unreachable(directory):
    directory.configure(should_succeed=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the review status is "{status}"'))
def review_status_is(outcome, status):
    review = current_domain.repository_for(Review).get(outcome["review_id"])
    assert review.status == status


@then("no review is stored")
def no_review_stored():
    assert current_domain.repository_for(Review)._dao.query.all().items == []
