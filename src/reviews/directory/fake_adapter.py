"""Fake directory. Every id exists unless explicitly marked missing."""

from reviews.directory.port import DirectoryPort, DirectoryUnavailableError


class FakeDirectory(DirectoryPort):
    def __init__(self) -> None:
        self.should_succeed = True
        self.missing_businesses: set[str] = set()
        self.missing_locations: set[str] = set()
        self.missing_users: set[str] = set()

    def configure(self, should_succeed: bool = True) -> None:
        self.should_succeed = should_succeed

    def mark_business_missing(self, business_id: str) -> None:
        self.missing_businesses.add(str(business_id))

    def mark_location_missing(self, location_id: str) -> None:
        self.missing_locations.add(str(location_id))

    def mark_user_missing(self, user_id: str) -> None:
        self.missing_users.add(str(user_id))

    def _check(self, identifier: str, missing: set[str]) -> bool:
        if not self.should_succeed:
            raise DirectoryUnavailableError("Directory service unavailable")
        return str(identifier) not in missing

    def business_exists(self, business_id: str) -> bool:
        return self._check(business_id, self.missing_businesses)

    def location_exists(self, location_id: str) -> bool:
        return self._check(location_id, self.missing_locations)

    def user_exists(self, user_id: str) -> bool:
        return self._check(user_id, self.missing_users)
