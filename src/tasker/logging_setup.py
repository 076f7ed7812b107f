"""Logging configuration for tasker sessions.

``setup_logging`` builds a dedicated ``tasker`` logger and returns it; the
caller passes that logger to whatever needs it instead of relying on root
logger state.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from typing import Any

from rich.logging import RichHandler

from tasker.config import LoggingConfig

LOGGER_NAME = "tasker"

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(operation)s: %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class OperationFilter(logging.Filter):
    """Give records logged outside an operation a placeholder ``operation``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "operation"):
            record.operation = "-"
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including structured extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = value

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=TEXT_DATEFMT)


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Build the session logger.

    Args:
        config: Sink, level and format settings.

    Returns:
        The configured ``tasker`` logger. Handlers from a previous call are
        closed and replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    shutdown_logging(logger)

    logger.setLevel(config.level)
    logger.propagate = False

    log_path = config.file_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        log_path,
        when="midnight",
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(config.level)
    file_handler.setFormatter(_make_formatter(config))
    file_handler.addFilter(OperationFilter())
    logger.addHandler(file_handler)

    if config.console:
        console_handler = RichHandler(show_path=False, rich_tracebacks=True)
        console_handler.setLevel(config.console_level)
        console_handler.addFilter(OperationFilter())
        logger.addHandler(console_handler)

    return logger


def shutdown_logging(logger: logging.Logger) -> None:
    """Flush, close and detach all handlers of ``logger``."""
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
