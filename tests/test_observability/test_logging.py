"""Tests for structured logging setup and context binding."""

import logging

import pytest
import structlog

from lantern_ranker.observability import bind_context, clear_context, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Restore structlog defaults, context and root level after each test."""
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)
    clear_context()
    structlog.reset_defaults()


class TestContext:
    """Context variables bound to every log entry."""

    def test_bind_and_clear(self) -> None:
        bind_context(film_id="wizard-of-oz", profile="default")

        assert structlog.contextvars.get_contextvars() == {
            "film_id": "wizard-of-oz",
            "profile": "default",
        }

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}


class TestSetupLogging:
    """Renderer selection by environment."""

    def test_development_uses_console(self) -> None:
        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_uses_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_get_logger(self) -> None:
        setup_logging()

        logger = get_logger("lantern_ranker.test")
        logger.info("Scored film", film_id="wizard-of-oz")

    def test_explicit_level(self) -> None:
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_json_override(self) -> None:
        setup_logging(json_logs=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
