r"""Backoff strategy without any delay."""

from __future__ import annotations

__all__ = ["NoBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class NoBackoff(BaseBackoffStrategy):
    """Backoff strategy that never waits.

    Every attempt gets a zero delay, so a new attempt is started as
    soon as the event loop runs the timer. Only an action that
    completes without suspending can win against a zero delay. The
    sequence is infinite; combine it with ``take`` to bound it.

    Example:
        ```pycon
        >>> from aretry.backoff import NoBackoff
        >>> list(NoBackoff().take(3))
        [0.0, 0.0, 0.0]

        ```
    """

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return 0.0
