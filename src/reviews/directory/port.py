"""Directory port — existence checks against the business, location and user services.

Each check answers True/False when the owning service gives a definite
answer and raises ``DirectoryUnavailableError`` when it cannot be reached,
so that creation fails closed rather than trusting an unverifiable id.
"""

from abc import ABC, abstractmethod


class DirectoryUnavailableError(Exception):
    """An existence check could not be completed."""


class DirectoryPort(ABC):
    @abstractmethod
    def business_exists(self, business_id: str) -> bool: ...

    @abstractmethod
    def location_exists(self, location_id: str) -> bool: ...

    @abstractmethod
    def user_exists(self, user_id: str) -> bool: ...
