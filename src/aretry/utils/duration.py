r"""Conversion helpers for delay durations.

Delays are handled as float seconds internally. These helpers accept
the other common spellings of a duration.
"""

from __future__ import annotations

__all__ = ["milliseconds", "to_seconds"]

import math
from datetime import timedelta


def to_seconds(value: float | timedelta) -> float:
    """Convert a delay to float seconds.

    Args:
        value: The delay as seconds (``int`` or ``float``) or as a
            ``datetime.timedelta``.

    Returns:
        The delay in seconds.

    Raises:
        TypeError: If the value is not a number or a timedelta.
        ValueError: If the delay is negative or NaN.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.utils.duration import to_seconds
        >>> to_seconds(2)
        2.0
        >>> to_seconds(timedelta(milliseconds=250))
        0.25

        ```
    """
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = float(value)
    else:
        msg = f"delay must be a number of seconds or a timedelta, got {type(value).__name__}"
        raise TypeError(msg)
    if math.isnan(seconds) or seconds < 0:
        msg = f"delay must be non-negative, got {value}"
        raise ValueError(msg)
    return seconds


def milliseconds(*values: float) -> list[float]:
    """Convert millisecond counts to a list of delays in seconds.

    Example:
        ```pycon
        >>> from aretry.utils.duration import milliseconds
        >>> milliseconds(100, 200, 300)
        [0.1, 0.2, 0.3]

        ```
    """
    return [to_seconds(value) / 1000 for value in values]
