r"""Parameter validation utilities for backoff strategies and retry
configuration."""

from __future__ import annotations

__all__ = ["validate_delay", "validate_max_delay", "validate_retry_params"]

import math


def validate_delay(name: str, value: float) -> None:
    """Validate that a delay parameter is non-negative.

    Args:
        name: The parameter name, used in the error message.
        value: The delay in seconds.

    Raises:
        ValueError: If the value is negative or NaN.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_delay
        >>> validate_delay("base_delay", 0.5)
        >>> validate_delay("base_delay", -1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: base_delay must be non-negative, got -1.0

        ```
    """
    if math.isnan(value) or value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_max_delay(max_delay: float | None) -> None:
    """Validate an optional maximum delay cap.

    Raises:
        ValueError: If ``max_delay`` is set and not positive.
    """
    if max_delay is not None and (math.isnan(max_delay) or max_delay <= 0):
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)


def validate_retry_params(
    max_attempts: int | None,
    jitter_factor: float = 0.0,
    max_wait_time: float | None = None,
) -> None:
    """Validate retry configuration parameters.

    Args:
        max_attempts: Maximum number of attempts, or ``None`` for no
            limit. Must be >= 0 if provided.
        jitter_factor: Factor for adding random jitter to delays.
            Must be >= 0.
        max_wait_time: Maximum delay cap in seconds. Must be > 0 if
            provided.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3)
        >>> validate_retry_params(max_attempts=None, jitter_factor=0.1)
        >>> validate_retry_params(max_attempts=-1)  # doctest: +SKIP

        ```
    """
    if max_attempts is not None and max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)
    if jitter_factor < 0:
        msg = f"jitter_factor must be >= 0, got {jitter_factor}"
        raise ValueError(msg)
    if max_wait_time is not None and max_wait_time <= 0:
        msg = f"max_wait_time must be > 0, got {max_wait_time}"
        raise ValueError(msg)
