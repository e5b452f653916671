"""Logging setup for the Duphlux client and its command line."""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import IO, Iterable, Optional

# Shared client logger used across modules.
log = logging.getLogger("duphlux_client")

# Loggers pulled in by requests; they log every connection at DEBUG.
HTTP_LIBRARY_LOGGERS = ("urllib3", "urllib3.connectionpool", "charset_normalizer")

_TOKEN_PATTERN = re.compile(r"(['\"]?token['\"]?\s*[:=]\s*['\"]?)[^'\",\s}]+", re.IGNORECASE)


class TokenRedactingFilter(logging.Filter):
    """Replace the value of any ``token`` header or setting in a record with ``***``."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _TOKEN_PATTERN.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(
    level: str | int | None = None,
    stream: Optional[IO[str]] = None,
    quiet_loggers: Iterable[str] = HTTP_LIBRARY_LOGGERS,
) -> logging.Logger:
    """Attach a redacting console handler and set the client log level.

    Results printed by the CLI go to stdout, so log lines default to stderr.

    Args:
        level: Log level name or number. Falls back to ``LOG_LEVEL`` from the
            environment, then ``INFO``.
        stream: Stream for the handler; ``sys.stderr`` by default.
        quiet_loggers: Third-party loggers held at WARNING.

    Returns:
        logging.Logger: The ``duphlux_client`` logger.
    """
    resolved_level = _coerce_level(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        )
        handler.addFilter(TokenRedactingFilter())
        root.addHandler(handler)

    root.setLevel(resolved_level)
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    log.setLevel(resolved_level)
    log.debug("Logging configured at level %s", logging.getLevelName(resolved_level))
    return log


def _coerce_level(level: str | int | None) -> int:
    candidate = level if level is not None else os.getenv("LOG_LEVEL", "INFO")

    if isinstance(candidate, int):
        return candidate

    numeric = logging.getLevelName(str(candidate).upper())
    return numeric if isinstance(numeric, int) else logging.INFO
