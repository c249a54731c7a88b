"""Diagnostic logging for termhisto.

The histogram itself owns stdout, so every log record goes to stderr:
through Rich's ``RichHandler`` for people, or as one JSON object per line
for tools that scrape the output.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "termhisto"

# Set on the handler setup_logging installs, so foreign handlers
# (pytest's capture handlers, an embedding application's) are left alone.
_OWNED_ATTR = "_termhisto_owned"


class JsonLineFormatter(logging.Formatter):
    """Render a record as a single JSON line with timestamp, level, logger and message."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_handler(json_format: bool, console: Console | None) -> logging.Handler:
    if json_format:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLineFormatter())
    else:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    setattr(handler, _OWNED_ATTR, True)
    return handler


def setup_logging(
    level: int = logging.WARNING,
    *,
    json_format: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """Install the termhisto stderr handler and return the ``termhisto`` logger.

    Any handler a previous call installed is replaced, so switching between
    plain and JSON output works and the handler always writes to the
    current ``sys.stderr``. Handlers installed by anyone else are kept.

    Args:
        level: Threshold for the logger and its handler. Defaults to WARNING.
        json_format: Emit JSON lines instead of Rich-formatted records.
        console: Stderr console for Rich output. A new one is created if omitted.

    Returns:
        The configured ``termhisto`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    for existing in [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]:
        logger.removeHandler(existing)

    handler = _build_handler(json_format, console)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``termhisto.<name>``, e.g. ``get_logger("io.loader")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
