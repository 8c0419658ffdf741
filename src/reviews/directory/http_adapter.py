"""HTTP adapter for the business, location and user services.

200 means the entity exists, 404 means it does not; any other status or a
transport failure raises ``DirectoryUnavailableError``.
"""

import requests
import structlog

from reviews.directory.port import DirectoryPort, DirectoryUnavailableError

logger = structlog.get_logger(__name__)


class HttpDirectory(DirectoryPort):
    def __init__(
        self,
        business_url: str,
        location_url: str,
        user_url: str,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        self.business_url = business_url.rstrip("/")
        self.location_url = location_url.rstrip("/")
        self.user_url = user_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _exists(self, url: str, entity: str, identifier: str) -> bool:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Existence check failed", entity=entity, entity_id=identifier, error=str(exc))
            raise DirectoryUnavailableError(f"{entity} service unreachable") from exc

        if response.status_code == 200:
            return True
        if response.status_code == 404:
            logger.warning("Entity not found", entity=entity, entity_id=identifier)
            return False

        logger.warning(
            "Unexpected response from directory service",
            entity=entity,
            entity_id=identifier,
            status_code=response.status_code,
        )
        raise DirectoryUnavailableError(f"{entity} service returned HTTP {response.status_code}")

    def business_exists(self, business_id: str) -> bool:
        return self._exists(f"{self.business_url}/api/Business/{business_id}", "Business", str(business_id))

    def location_exists(self, location_id: str) -> bool:
        return self._exists(f"{self.location_url}/api/locations/{location_id}", "Location", str(location_id))

    def user_exists(self, user_id: str) -> bool:
        return self._exists(f"{self.user_url}/api/users/{user_id}", "User", str(user_id))
