r"""Backoff strategy over an explicit list of delays."""

from __future__ import annotations

__all__ = ["ExplicitBackoff"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.duration import milliseconds, to_seconds

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import timedelta


class ExplicitBackoff(BaseBackoffStrategy):
    """Backoff strategy that yields a fixed list of delays, then ends.

    This is the only finite built-in strategy. A retry run over it
    makes at most ``len(delays)`` attempts.

    Args:
        delays: The delays in order, as seconds or ``timedelta``.

    Example:
        ```pycon
        >>> from aretry.backoff import ExplicitBackoff
        >>> backoff = ExplicitBackoff([0.1, 0.2, 0.3])
        >>> list(backoff)
        [0.1, 0.2, 0.3]
        >>> backoff.calculate(3) is None
        True
        >>> len(backoff)
        3

        ```
    """

    def __init__(self, delays: Iterable[float | timedelta]) -> None:
        self.delays = tuple(to_seconds(delay) for delay in delays)

    @classmethod
    def from_milliseconds(cls, *values: float) -> ExplicitBackoff:
        """Create a strategy from delays given in milliseconds.

        Example:
            ```pycon
            >>> from aretry.backoff import ExplicitBackoff
            >>> list(ExplicitBackoff.from_milliseconds(100, 250))
            [0.1, 0.25]

            ```
        """
        return cls(milliseconds(*values))

    def calculate(self, attempt: int) -> float | None:
        if 0 <= attempt < len(self.delays):
            return self.delays[attempt]
        return None

    def __len__(self) -> int:
        return len(self.delays)
