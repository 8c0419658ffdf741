"""Directory factory: fake adapter by default, HTTP when DIRECTORY_ADAPTER=http."""

from reviews.config import get_settings
from reviews.directory.port import DirectoryPort

_current_directory: DirectoryPort | None = None


def get_directory() -> DirectoryPort:
    """Return the configured directory adapter (singleton)."""
    global _current_directory
    if _current_directory is None:
        settings = get_settings()
        if settings.directory_adapter == "fake":
            from reviews.directory.fake_adapter import FakeDirectory

            _current_directory = FakeDirectory()
        elif settings.directory_adapter == "http":
            from reviews.directory.http_adapter import HttpDirectory

            _current_directory = HttpDirectory(
                business_url=settings.business_service_url,
                location_url=settings.location_service_url,
                user_url=settings.user_service_url,
                timeout=settings.collaborator_timeout_seconds,
            )
        else:
            raise ValueError(f"Unknown directory adapter: {settings.directory_adapter}")
    return _current_directory


def set_directory(directory: DirectoryPort) -> None:
    """Override the active directory adapter (useful for tests)."""
    global _current_directory
    _current_directory = directory


def reset_directory() -> None:
    """Reset the directory singleton."""
    global _current_directory
    _current_directory = None
