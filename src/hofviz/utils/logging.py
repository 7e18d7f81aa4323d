"""Centralized JSON formatter and logger setup for structured logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

_PACKAGE_LOGGER = "hofviz"

# Attributes every LogRecord carries; anything else came in via ``extra=``
_RESERVED = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.
    
    Merges any `extra=` kwargs directly into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Merge any extra fields passed via logger.info(..., extra={...})
        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(verbose: bool = False, json_logs: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI runs in
    one process do not duplicate output.

    Args:
        verbose: Log at DEBUG instead of INFO.
        json_logs: Use ``JsonFormatter`` instead of a plain text format.

    Returns:
        The configured ``hofviz`` logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(levelname)-7s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
