"""Notifier factory: fake adapter by default, HTTP when NOTIFIER_ADAPTER=http."""

from reviews.config import get_settings
from reviews.notifier.port import ReviewNotifier

_current_notifier: ReviewNotifier | None = None


def get_notifier() -> ReviewNotifier:
    """Return the configured notifier (singleton)."""
    global _current_notifier
    if _current_notifier is None:
        settings = get_settings()
        if settings.notifier_adapter == "fake":
            from reviews.notifier.fake_adapter import FakeReviewNotifier

            _current_notifier = FakeReviewNotifier()
        elif settings.notifier_adapter == "http":
            from reviews.notifier.http_adapter import HttpReviewNotifier

            _current_notifier = HttpReviewNotifier(
                base_url=settings.notification_service_url,
                timeout=settings.collaborator_timeout_seconds,
            )
        else:
            raise ValueError(f"Unknown notifier adapter: {settings.notifier_adapter}")
    return _current_notifier


def set_notifier(notifier: ReviewNotifier) -> None:
    """Override the active notifier (useful for tests)."""
    global _current_notifier
    _current_notifier = notifier


def reset_notifier() -> None:
    """Reset the notifier singleton."""
    global _current_notifier
    _current_notifier = None
