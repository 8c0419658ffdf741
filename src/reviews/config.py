"""Service settings for the Reviews domain.

Protean's own configuration (databases, brokers, event processing) lives in
``pyproject.toml`` under ``[tool.protean]``. Everything the domain needs to
reach its collaborators is read from environment variables here.
"""

import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value else default


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.environ.get(name)
    if not value:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class ServiceSettings:
    """Collaborator endpoints, timeouts and abuse-query defaults."""

    compliance_adapter: str = "fake"
    notifier_adapter: str = "fake"
    directory_adapter: str = "fake"

    compliance_service_url: str = "http://localhost:5100"
    notification_service_url: str = "http://localhost:5200"
    business_service_url: str = "http://localhost:5300"
    location_service_url: str = "http://localhost:5400"
    user_service_url: str = "http://localhost:5500"

    collaborator_timeout_seconds: float = 5.0
    notification_fallback_email: str = "unknown@example.com"
    internal_api_token: str = "dev-internal-token"

    duplicate_window_hours: int = 72
    frequency_window_hours: int = 12
    category_window_hours: int = 12
    spike_window_hours: int = 1
    abuse_scan_limit: int = 10_000
    listing_limit: int = 100
    trusted_proxies: tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        defaults = cls()
        return cls(
            compliance_adapter=os.environ.get("COMPLIANCE_ADAPTER", defaults.compliance_adapter),
            notifier_adapter=os.environ.get("NOTIFIER_ADAPTER", defaults.notifier_adapter),
            directory_adapter=os.environ.get("DIRECTORY_ADAPTER", defaults.directory_adapter),
            compliance_service_url=os.environ.get("COMPLIANCE_SERVICE_URL", defaults.compliance_service_url),
            notification_service_url=os.environ.get("NOTIFICATION_SERVICE_URL", defaults.notification_service_url),
            business_service_url=os.environ.get("BUSINESS_SERVICE_URL", defaults.business_service_url),
            location_service_url=os.environ.get("LOCATION_SERVICE_URL", defaults.location_service_url),
            user_service_url=os.environ.get("USER_SERVICE_URL", defaults.user_service_url),
            collaborator_timeout_seconds=_env_float(
                "COLLABORATOR_TIMEOUT_SECONDS", defaults.collaborator_timeout_seconds
            ),
            notification_fallback_email=os.environ.get(
                "NOTIFICATION_FALLBACK_EMAIL", defaults.notification_fallback_email
            ),
            internal_api_token=os.environ.get("INTERNAL_API_TOKEN", defaults.internal_api_token),
            duplicate_window_hours=_env_int("DUPLICATE_WINDOW_HOURS", defaults.duplicate_window_hours),
            frequency_window_hours=_env_int("FREQUENCY_WINDOW_HOURS", defaults.frequency_window_hours),
            category_window_hours=_env_int("CATEGORY_WINDOW_HOURS", defaults.category_window_hours),
            spike_window_hours=_env_int("SPIKE_WINDOW_HOURS", defaults.spike_window_hours),
            abuse_scan_limit=_env_int("ABUSE_SCAN_LIMIT", defaults.abuse_scan_limit),
            listing_limit=_env_int("LISTING_LIMIT", defaults.listing_limit),
            trusted_proxies=_env_list("TRUSTED_PROXIES", defaults.trusted_proxies),
        )


_current_settings: ServiceSettings | None = None


def get_settings() -> ServiceSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _current_settings
    if _current_settings is None:
        _current_settings = ServiceSettings.from_env()
    return _current_settings


def set_settings(settings: ServiceSettings) -> None:
    """Override the active settings (useful for tests)."""
    global _current_settings
    _current_settings = settings


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""
    global _current_settings
    _current_settings = None
