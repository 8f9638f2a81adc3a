r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_delay, validate_max_delay


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (factor ** attempt), with optional
    max_delay cap. The sequence is infinite.

    Without ``max_delay`` the delay grows without bound. Long runs
    should either set ``max_delay`` or limit the number of attempts
    with ``take``.

    Args:
        base_delay: The delay of the first attempt in seconds
            (default: 0.3).
        factor: The growth factor between two attempts (default: 2.0).
            Must be >= 1.
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.3)
        >>> backoff.calculate(0)
        0.3
        >>> backoff.calculate(1)
        0.6
        >>> backoff.calculate(2)
        1.2
        >>> backoff = ExponentialBackoff(base_delay=1.0, factor=3.0, max_delay=5.0)
        >>> [backoff.calculate(i) for i in range(3)]
        [1.0, 3.0, 5.0]

        ```
    """

    def __init__(
        self,
        base_delay: float = 0.3,
        factor: float = 2.0,
        max_delay: float | None = None,
    ) -> None:
        validate_delay("base_delay", base_delay)
        if factor < 1:
            msg = f"factor must be >= 1, got {factor}"
            raise ValueError(msg)
        validate_max_delay(max_delay)

        self.base_delay = base_delay
        self.factor = factor
        self.max_delay = max_delay

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The calculated delay: base_delay * (factor ** attempt),
            capped at max_delay if set. Growth past the float range
            gives ``inf``.
        """
        try:
            delay = self.base_delay * (self.factor**attempt)
        except OverflowError:
            delay = float("inf") if self.base_delay > 0 else 0.0
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
