"""Request Logging — JSON lines for the API process, plain text for local runs.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger and message
    - Request context (method, path, status_code, error_code, resource_id) is copied
      from `extra=` when set; other extra keys are dropped
    - UUIDs, datetimes and other non-JSON values are stringified instead of raising
    - setup_logging swaps its handler on repeat calls; it never stacks a second one

Design Decisions:
    - LOG_FORMAT "json" selects JSONFormatter, anything else the text format
    - One line per failure comes from api/error_handlers.py; routes do not log
"""

import json
import logging
from datetime import datetime, timezone

REQUEST_FIELDS = ("method", "path", "status_code", "error_code", "resource_id")
TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (field, getattr(record, field))
            for field in REQUEST_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


_installed: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the API's stream handler on the root logger."""
    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(fmt))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed = handler
    return handler
