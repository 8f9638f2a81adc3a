r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait for an attempt
    before a new attempt is started. Iterating a strategy yields
    ``calculate(0)``, ``calculate(1)``, ... and stops at the first
    ``None``. Each call to ``iter()`` starts from attempt 0 again, so a
    strategy can be shared by several retry runs.

    Example:
        ```pycon
        >>> from aretry.backoff import BaseBackoffStrategy
        >>> class Countdown(BaseBackoffStrategy):
        ...     def calculate(self, attempt):
        ...         return None if attempt >= 3 else float(3 - attempt)
        ...
        >>> list(Countdown())
        [3.0, 2.0, 1.0]

        ```
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float | None:
        """Calculate the delay for a given attempt.

        Args:
            attempt: The attempt number (0-indexed). attempt=0 is the
                first attempt, attempt=1 the second, etc.

        Returns:
            The delay in seconds, or ``None`` if the strategy has no
            delay for this attempt. A strategy that returns ``None``
            once must return ``None`` for all later attempts.
        """

    def __iter__(self) -> Iterator[float]:
        for attempt in itertools.count():
            delay = self.calculate(attempt)
            if delay is None:
                return
            yield delay

    def take(self, n: int) -> Iterable[float]:
        """Limit the strategy to at most ``n`` delays.

        Args:
            n: The maximum number of delays, i.e. of attempts.

        Returns:
            An iterable that yields the first ``n`` delays. It can be
            iterated several times.

        Raises:
            ValueError: If ``n`` is negative.

        Example:
            ```pycon
            >>> from aretry.backoff import ConstantBackoff
            >>> list(ConstantBackoff(delay=0.5).take(3))
            [0.5, 0.5, 0.5]

            ```
        """
        if n < 0:
            msg = f"n must be >= 0, got {n}"
            raise ValueError(msg)
        return _Limited(self, n)

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__qualname__}({params})"


class _Limited:
    """Re-iterable view on the first ``limit`` delays of a strategy."""

    def __init__(self, strategy: BaseBackoffStrategy, limit: int) -> None:
        self.strategy = strategy
        self.limit = limit

    def __iter__(self) -> Iterator[float]:
        return itertools.islice(self.strategy, self.limit)

    def __repr__(self) -> str:
        return f"{self.strategy!r}.take({self.limit})"
