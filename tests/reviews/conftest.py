import pytest
from protean.integrations.pytest import DomainFixture
from reviews.compliance import reset_gateway, set_gateway
from reviews.compliance.fake_adapter import FakeComplianceGateway
from reviews.config import reset_settings
from reviews.directory import reset_directory, set_directory
from reviews.directory.fake_adapter import FakeDirectory
from reviews.notifier import reset_notifier, set_notifier
from reviews.notifier.fake_adapter import FakeReviewNotifier


@pytest.fixture(scope="session")
def reviews_bed():
    from reviews.domain import reviews
    from reviews.utils.db import drop_db, setup_db

    bed = DomainFixture(reviews)
    bed.setup()
    setup_db(reviews)
    yield bed
    drop_db(reviews)
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(reviews_bed):
    with reviews_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def gateway():
    fake = FakeComplianceGateway()
    set_gateway(fake)
    yield fake
    reset_gateway()


@pytest.fixture(autouse=True)
def notifier():
    fake = FakeReviewNotifier()
    set_notifier(fake)
    yield fake
    reset_notifier()


@pytest.fixture(autouse=True)
def directory():
    fake = FakeDirectory()
    set_directory(fake)
    yield fake
    reset_directory()


@pytest.fixture(autouse=True)
def _settings():
    yield
    reset_settings()
