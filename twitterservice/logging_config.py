"""Log formatters for applications embedding the client (JSON and text)."""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

from twitterservice.config import settings
from twitterservice.request_context import get_request_id

LOGGER_NAME = "twitterservice"

# Attributes present on every LogRecord; anything else is a caller-supplied extra.
_STANDARD_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime"}


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JSONFormatter(logging.Formatter):
    """Single-line JSON records, one per API call step."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id

        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = "".join(
                traceback.format_exception(*record.exc_info)
            )

        return json.dumps(entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines prefixed with the short correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        ts = _timestamp(record).strftime("%Y-%m-%d %H:%M:%S")
        request_id = get_request_id()
        rid = f"[{request_id[:12]}] " if request_id else ""

        line = f"{ts} {record.levelname:<8} {rid}{record.name} - {record.getMessage()}"
        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return line


def setup_logging(
    log_level: str | None = None,
    log_format: str | None = None,
    *,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Attach a stderr handler to the library logger.

    The library itself never calls this; applications opt in once at startup.
    Level and format default to ``settings.log_level`` and ``settings.log_format``.
    """
    log_level = log_level or settings.log_level
    log_format = log_format or settings.log_format
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    logger.addHandler(handler)
    return logger
