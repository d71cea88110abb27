"""Structured Logging — one root handler shared by the app and the uvicorn server.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Request context (user_id, error_code, path, operation) rendered when set
      via `extra=`, in both JSON and text mode
    - uvicorn's own loggers propagate to root, so server and app lines share a format
    - setup_logging is idempotent: it replaces root handlers instead of adding more

Design Decisions:
    - Timestamps come from record.created, not formatting time, so buffered
      or re-emitted records keep the moment they were logged
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("user_id", "error_code", "path", "operation")
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable lines with request context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        head, sep, trace = line.partition("\n")
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{head} [{pairs}]{sep}{trace}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the single root handler and route server loggers through it."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
