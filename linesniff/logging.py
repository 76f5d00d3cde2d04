"""
Logging for the linesniff namespace.

Records go to stderr so `--json` reports on stdout stay machine-readable.
Structured context is passed through `extra=` and rendered either as a JSON
object per line or as trailing key=value pairs on a text line.

Usage:
    from linesniff.logging import get_logger
    logger = get_logger("scoring")
    logger.debug("Snippet analyzed", extra={"total_lines": 12})
"""

from __future__ import annotations

import json
import logging
import sys

from linesniff.config import settings

CONTEXT_FIELDS = ("language", "path", "total_lines", "ai_lines",
                  "structure_score", "duration_ms", "error")


class ContextFormatter(logging.Formatter):
    """Appends the known `extra=` fields of a record, as JSON or key=value."""

    def __init__(self, as_json: bool = False):
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        self.as_json = as_json

    def _context(self, record: logging.LogRecord) -> dict:
        return {
            key: getattr(record, key)
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        }

    def format(self, record: logging.LogRecord) -> str:
        context = self._context(record)
        if not self.as_json:
            line = super().format(record)
            if context:
                line += " " + " ".join(f"{k}={v}" for k, v in context.items())
            return line

        entry = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **context,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str | None = None) -> logging.Logger:
    """(Re)configure the linesniff logger; safe to call once per CLI invocation."""
    logger = logging.getLogger("linesniff")
    numeric = getattr(logging, (level or settings.LOG_LEVEL).upper(), None)
    logger.setLevel(numeric if isinstance(numeric, int) else logging.WARNING)
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextFormatter(as_json=settings.LOG_FORMAT == "json"))
    logger.handlers = [handler]
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"linesniff.{name}")
