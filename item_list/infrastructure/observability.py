"""Structured Logging — JSON formatter and setup for engine observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (source, status, item_count, error_code) surfaced when present
    - JSON format by default, human-readable when log_format == "text"

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once by the embedding application, never on import
"""

import logging
import json
from datetime import datetime, timezone

from item_list.config import Settings

_EXTRA_FIELDS: tuple[str, ...] = (
    "source", "status", "item_count", "error_code",
    "listener_count", "collaborator",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings) -> logging.Handler:
    """Configure logging from Settings.log_level / Settings.log_format."""
    return setup_logging(settings.log_level, settings.log_format)
