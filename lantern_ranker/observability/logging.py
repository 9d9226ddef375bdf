"""
Structured logging for lantern-ranker using structlog.

Scoring passes log through structlog with film-scoped context; library
modules that only emit debug lines use plain ``logging.getLogger``. Both end
up in the standard library root logger, which writes to stderr so that JSON
printed by the CLI on stdout stays machine-readable.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from lantern_ranker.config.settings import get_settings

_SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderers(json_logs: bool) -> list[Processor]:
    if json_logs:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name. Defaults to ``Settings.log_level``.
        json_logs: Render JSON lines instead of console output. Defaults to
            True in production.

    Usage:
        setup_logging()
        logger = structlog.get_logger(__name__)
        logger.info("Scoring film", film_id="wizard-of-oz", results=42)
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = settings.is_production

    structlog.configure(
        processors=_SHARED_PROCESSORS + _renderers(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables to every subsequent log entry.

    Used to tag all entries of one scoring pass with its film or profile.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
