r"""aretry - Retry asynchronous actions following a backoff schedule.

The package races every attempt of an action against a delay pulled
from a backoff strategy. The first attempt to complete wins; an attempt
whose delay elapses first is cancelled and replaced by a new one. When
the strategy runs out of delays, ``ExhaustionError`` is raised.

Key Features:
    - Backoff strategies: Constant, No delay, Exponential, Fibonacci,
      Linear, explicit lists, and any iterable of delays
    - ``RetryConfig`` with attempt limit, delay cap and jitter
    - Explicit cancellation of abandoned attempts
    - Structured logging of attempt transitions
    - httpx integration for re-sending stalled requests

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry
    >>> from aretry.backoff import ExponentialBackoff
    >>> async def fetch(attempt):
    ...     return f"done at attempt {attempt}"
    ...
    >>> asyncio.run(retry(ExponentialBackoff(base_delay=0.1).take(5), fetch))
    'done at attempt 0'

    ```
"""

from __future__ import annotations

__all__ = [
    "ExhaustionError",
    "RetryConfig",
    "RetryDriver",
    "__version__",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.config import RetryConfig
from aretry.exceptions import ExhaustionError
from aretry.retry import RetryDriver, retry

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
