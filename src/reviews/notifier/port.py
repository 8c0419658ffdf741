"""Notifier port — abstract interface for review outcome notifications.

Delivery is best-effort. Adapters report the outcome as a dict with keys
``status`` ("sent" or "failed") and optionally ``error``; callers log
failures and move on.
"""

from abc import ABC, abstractmethod


class ReviewNotifier(ABC):
    """Abstract interface for review outcome notification adapters."""

    @abstractmethod
    def send_review_approved(self, email: str, review_id: str) -> dict:
        """Tell the reviewer their review is live."""
        ...

    @abstractmethod
    def send_review_rejected(self, email: str, review_id: str, reasons: list[str]) -> dict:
        """Tell the reviewer their review was rejected, with reasons."""
        ...

    @abstractmethod
    def send_review_flagged(self, email: str, review_id: str) -> dict:
        """Tell the reviewer their review is held for manual review."""
        ...
