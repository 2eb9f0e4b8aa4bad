"""
Structured logging for nbssh.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

PACKAGE_LOGGER = "nbssh"

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "timestamp"}


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": getattr(record, 'timestamp', None)
            or datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Fields passed through ``extra=``
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            try:
                json.dumps(value)
                log_entry[key] = value
            except (TypeError, ValueError):
                log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'))


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", fmt: str = "json", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single handler to the package logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: Log level name
        fmt: ``json`` for structured output, ``text`` for plain lines
        stream: Output stream, stderr by default

    Returns:
        logging.Logger: The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, '_nbssh_handler', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    handler._nbssh_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False
    return logger
