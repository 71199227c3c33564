"""Logging setup for tsungforge."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

_ROOT = "tsungforge"
_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class _JsonFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, msg (and exc if any)."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True)


def setup_logging(
    level: int = logging.WARNING,
    *,
    json_format: bool = False,
) -> logging.Logger:
    """Attach a stderr handler to the ``tsungforge`` logger.

    Only one handler is ever installed; calling this again just moves the
    level. Output goes to stderr so rendered XML on stdout stays clean.

    Args:
        level: Threshold for the ``tsungforge`` namespace. Defaults to
            WARNING, which surfaces degraded dynamic variables only.
        json_format: Emit JSON lines instead of plain text.

    Returns:
        The ``tsungforge`` logger.
    """
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)

    existing = [h for h in logger.handlers if getattr(h, "_tsungforge", False)]
    if existing:
        for handler in existing:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        _JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT, "%H:%M:%S")
    )
    handler._tsungforge = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``tsungforge.<name>``, e.g. ``get_logger("engine.runner")``."""
    return logging.getLogger(f"{_ROOT}.{name}")
