"""Tests for the review service logging helpers."""

import pytest
import structlog
from reviews.utils.logging import SERVICE_NAME, build_processors, clear_context, get_log_level, review_context


@pytest.fixture(autouse=True)
def _clean_context():
    clear_context()
    yield
    clear_context()


class TestLogLevel:
    @pytest.mark.parametrize(
        "env, level",
        [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING")],
    )
    def test_derived_from_environment(self, monkeypatch, env, level):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", env)
        assert get_log_level() == level

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"


class TestProcessors:
    def test_production_renders_json(self):
        assert isinstance(build_processors("production")[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        assert isinstance(build_processors("development")[-1], structlog.dev.ConsoleRenderer)

    def test_every_line_names_the_service(self):
        add_service = build_processors("production")[1]
        assert add_service(None, "info", {"event": "hello"})["service"] == SERVICE_NAME


class TestReviewContext:
    def test_binds_review_id_only_inside_block(self):
        with review_context("rev-001"):
            assert structlog.contextvars.get_contextvars()["review_id"] == "rev-001"
        assert "review_id" not in structlog.contextvars.get_contextvars()
