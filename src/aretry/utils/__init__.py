r"""Utility functions for duration handling, parameter validation and
structured logging."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "log_structured",
    "milliseconds",
    "to_seconds",
    "validate_delay",
    "validate_max_delay",
    "validate_retry_params",
]

from aretry.utils.duration import milliseconds, to_seconds
from aretry.utils.structured_logging import StructuredFormatter, log_structured
from aretry.utils.validation import validate_delay, validate_max_delay, validate_retry_params
