r"""Structured logging utilities for machine-readable log output.

The retry driver logs every attempt transition through
``log_structured`` with ``attempt`` and ``delay`` fields. Plugging
``StructuredFormatter`` into a handler turns those records into JSON
lines.

Example:
    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter, set_retry_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    set_retry_id("fetch-user-42")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_retry_id",
    "get_retry_id",
    "log_structured",
    "set_retry_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_retry_id: contextvars.ContextVar[str | None] = contextvars.ContextVar("retry_id", default=None)

# Attributes every LogRecord carries; anything else came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()) | {
    "message",
    "asctime",
    "taskName",
}


def get_retry_id() -> str | None:
    """Get the retry id of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import get_retry_id, set_retry_id
        >>> set_retry_id("job-1")
        >>> get_retry_id()
        'job-1'

        ```
    """
    return _retry_id.get()


def set_retry_id(retry_id: str) -> None:
    """Set the retry id attached to log records of the current context.

    The id lives in a context variable, so each asyncio task sees the
    value that was current when it was created.
    """
    _retry_id.set(retry_id)


def clear_retry_id() -> None:
    """Clear the retry id of the current context."""
    _retry_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes one JSON object with the fields ``timestamp``,
    ``level``, ``logger``, ``message``, ``module``, ``function`` and
    ``line``, plus ``retry_id`` when set and every field passed through
    ``extra``.

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("attempt started", extra={"attempt": 0})
        >>> '"attempt": 0' in stream.getvalue()
        True

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        retry_id = get_retry_id()
        if retry_id is not None:
            log_data["retry_id"] = retry_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record timestamp as ISO 8601 in UTC."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **extra: Fields to attach to the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)
