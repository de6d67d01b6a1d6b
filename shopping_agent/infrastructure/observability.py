"""Structured Logging: JSON formatter and setup for the agent service.

Invariants:
    - Every line has timestamp, level, logger name, and message
    - Every `extra=` key a caller passes is surfaced (session_id, tool_name,
      input_tokens, runtime_error_type, ...); None values are left out
    - setup_logging is idempotent: calling it again replaces our handler, never stacks it

Design Decisions:
    - stdlib logging with a JSONFormatter, no third-party logging lib
    - Extras are found by subtracting the attributes every LogRecord has, so a new
      field logged in services/ needs no change here
    - Non-JSON values (e.g. enums, datetimes) are rendered with str()
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "shopping_agent"

_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def record_extras(record: logging.LogRecord) -> dict:
    """The `extra=` fields attached to a record, minus unset ones."""
    return {
        key: val for key, val in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_") and val is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local runs; extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler; returns it."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
