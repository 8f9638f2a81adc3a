r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_delay, validate_max_delay


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1), with
    optional max_delay cap, where fibonacci(1) = fibonacci(2) = 1. The
    multipliers are therefore 1, 1, 2, 3, 5, 8, 13, ... and the first
    attempt already waits ``base_delay``. The sequence is infinite.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0)
        >>> [backoff.calculate(i) for i in range(6)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> backoff = FibonacciBackoff(base_delay=1.0, max_delay=10.0)
        >>> backoff.calculate(10)  # fib(11) = 89, but capped
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        validate_delay("base_delay", base_delay)
        validate_max_delay(max_delay)

        self.base_delay = base_delay
        self.max_delay = max_delay

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed).

        Args:
            n: The position in the Fibonacci sequence (1-indexed).

        Returns:
            The nth Fibonacci number, or 0 for ``n <= 0``.
        """
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        try:
            delay = float(self.base_delay) * self._fibonacci(attempt + 1)
        except OverflowError:
            delay = float("inf") if self.base_delay > 0 else 0.0
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
