"""Logging for the review service.

stdlib logging carries the output (stdout, plus a rotating file when
``LOG_DIR`` is set) and structlog renders it: JSON lines in production and
staging, a rich console everywhere else. Every line carries
``service=review-service`` and whatever request or review context is bound.
"""

import logging
import logging.handlers
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

SERVICE_NAME = "review-service"

LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def runtime_env() -> str:
    return (os.getenv("PROTEAN_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def get_log_level() -> str:
    """``LOG_LEVEL`` wins; otherwise derived from the runtime environment."""
    return os.getenv("LOG_LEVEL", LEVELS.get(runtime_env(), "INFO")).upper()


def _add_service(_logger: Any, _method: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_stdlib_logging() -> None:
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [logging.StreamHandler(sys.stdout)]

    log_dir = os.getenv("LOG_DIR")
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(
            logging.handlers.RotatingFileHandler(
                filename=Path(log_dir) / "review-service.log",
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
        )

    # Collaborator HTTP calls are logged by the adapters themselves
    for noisy in ("urllib3", "asyncio", "protean"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def build_processors(env: str) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_service,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if env in ("production", "staging"):
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                exception_formatter=structlog.dev.RichTracebackFormatter(max_frames=2),
            )
        )
    return processors


def configure_logging() -> None:
    """Configure stdlib and structlog output for the current environment."""
    setup_stdlib_logging()
    structlog.configure(
        processors=build_processors(runtime_env()),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind request-scoped values (method, path) onto subsequent log lines."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def review_context(review_id: str) -> Iterator[None]:
    """Tag log lines with ``review_id`` for the duration of the block."""
    with structlog.contextvars.bound_contextvars(review_id=review_id):
        yield
