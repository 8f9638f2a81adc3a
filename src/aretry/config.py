r"""Configuration dataclass and defaults for retry runs.

``RetryConfig`` bundles a backoff strategy with the usual knobs on top
of it: an attempt limit, a cap on individual delays and jitter. A
config is itself a delay sequence, so it can be passed to ``retry``
wherever a strategy or a list of delays is accepted.
"""

from __future__ import annotations

__all__ = ["DEFAULT_JITTER_FACTOR", "DEFAULT_MAX_ATTEMPTS", "RetryConfig"]

import itertools
import logging
import random
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.backoff.exponential import ExponentialBackoff
from aretry.utils.duration import to_seconds
from aretry.utils.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import timedelta

logger: logging.Logger = logging.getLogger(__name__)

# Default maximum number of attempts, i.e. of delays pulled from the backoff
DEFAULT_MAX_ATTEMPTS = 4

# Jitter is disabled by default so delays are deterministic
DEFAULT_JITTER_FACTOR = 0.0


@dataclass
class RetryConfig:
    """Configuration for the delay sequence of a retry run.

    Iterating the config yields, for each attempt, the delay of the
    backoff strategy, capped at ``max_wait_time`` and increased by a
    random jitter of up to ``jitter_factor * delay``. Iteration stops
    after ``max_attempts`` delays or when the backoff itself ends.

    Args:
        backoff: Delay sequence to build on. Any iterable of delays is
            accepted. Defaults to ``ExponentialBackoff()``.
        max_attempts: Maximum number of attempts. ``None`` means no
            limit beyond the backoff's own length. Must be >= 0.
        max_wait_time: Optional cap in seconds for every delay. Must be
            > 0 if provided.
        jitter_factor: Factor for adding random jitter to delays. Must
            be >= 0.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(backoff=ConstantBackoff(delay=2.0), max_attempts=3)
        >>> list(config)
        [2.0, 2.0, 2.0]
        >>> list(config.merge(max_wait_time=1.5))
        [1.5, 1.5, 1.5]
        >>> config.max_wait_time is None  # original unchanged
        True

        ```
    """

    backoff: Iterable[float | timedelta] | None = None
    max_attempts: int | None = DEFAULT_MAX_ATTEMPTS
    max_wait_time: float | None = None
    jitter_factor: float = DEFAULT_JITTER_FACTOR

    def __post_init__(self) -> None:
        validate_retry_params(
            max_attempts=self.max_attempts,
            jitter_factor=self.jitter_factor,
            max_wait_time=self.max_wait_time,
        )

    def __iter__(self) -> Iterator[float]:
        backoff = self.backoff if self.backoff is not None else ExponentialBackoff()
        delays = (self._adjust(to_seconds(delay)) for delay in backoff)
        if self.max_attempts is not None:
            return itertools.islice(delays, self.max_attempts)
        return delays

    def _adjust(self, delay: float) -> float:
        if self.max_wait_time is not None and delay > self.max_wait_time:
            logger.debug(
                f"Capping delay from {delay:.2f}s to {self.max_wait_time:.2f}s "
                f"(max_wait_time={self.max_wait_time:.2f}s)"
            )
            delay = self.max_wait_time
        if self.jitter_factor > 0:
            jitter = random.uniform(0, self.jitter_factor) * delay  # noqa: S311
            delay += jitter
        return delay

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Example:
            ```pycon
            >>> from aretry.config import RetryConfig
            >>> RetryConfig(max_attempts=5).to_dict()["max_attempts"]
            5

            ```
        """
        return {
            "backoff": self.backoff,
            "max_attempts": self.max_attempts,
            "max_wait_time": self.max_wait_time,
            "jitter_factor": self.jitter_factor,
        }
