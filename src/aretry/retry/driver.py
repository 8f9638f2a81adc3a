r"""Retry driver racing each attempt of an action against a delay.

This module provides ``retry``, the entry point of the package, and
the ``RetryDriver`` awaitable it returns.
"""

from __future__ import annotations

__all__ = ["RetryDriver", "retry"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.exceptions import ExhaustionError
from aretry.retry.state import PollKind, RetryState
from aretry.utils.duration import to_seconds
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Generator, Iterable
    from datetime import timedelta

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryDriver(Generic[T]):
    """Awaitable that runs an action until one attempt completes.

    For every attempt the driver pulls the next delay from the delay
    sequence, calls the action factory with the attempt index and races
    the resulting action against a timer of that delay:

    - If the action completes first, its result is the result of the
      driver. If the action raised, the exception propagates unchanged.
    - If the timer elapses first, the attempt is abandoned (its action
      is cancelled) and the next attempt starts.
    - If the delay sequence has no delay left for a new attempt,
      ``ExhaustionError`` is raised.

    The driver does not inspect results: a returned value is a success
    as far as the driver is concerned. A finite delay sequence of
    length L bounds the number of attempts to L. There is no bound on
    the total wall-clock time.

    Cancelling the task awaiting the driver cancels the attempt in
    flight. The action factory is not called again afterwards.

    Args:
        delays: The delay sequence. Any iterable of delays in seconds or
            ``timedelta`` values, e.g. a backoff strategy, a
            ``RetryConfig`` or a list. A ``None`` item ends the
            sequence like the end of the iterable does.
        action: The action factory. It is called with the attempt index
            (0, 1, 2, ...) and must return a new awaitable each time.
        sleep: The timer primitive, called with a delay in seconds.
            Defaults to ``asyncio.sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import RetryDriver
        >>> async def action(attempt):
        ...     await asyncio.sleep(0.25)
        ...     return attempt
        ...
        >>> asyncio.run(RetryDriver([0.1, 0.2, 0.3], action).run())  # doctest: +SKIP
        2

        ```
    """

    def __init__(
        self,
        delays: Iterable[float | timedelta | None],
        action: Callable[[int], Awaitable[T]],
        *,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._delays = iter(delays)
        self._action = action
        self._sleep = sleep if sleep is not None else asyncio.sleep
        self._state: RetryState[T] = RetryState()
        self._awaited = False
        self._attempts = 0

    @property
    def attempts(self) -> int:
        """The number of attempts started so far."""
        return self._attempts

    def __await__(self) -> Generator[None, None, T]:
        return self.run().__await__()

    async def run(self) -> T:
        """Drive the attempts to completion.

        Returns:
            The result of the first action that completed.

        Raises:
            ExhaustionError: If the delay sequence ended before any
                action completed.
            RuntimeError: If the driver was already run.
        """
        if self._awaited:
            msg = "a RetryDriver can only be awaited once"
            raise RuntimeError(msg)
        self._awaited = True
        try:
            while True:
                poll = self._state.poll()
                if poll.kind is PollKind.START:
                    if poll.attempt > 0:
                        log_structured(
                            logger,
                            logging.DEBUG,
                            f"Attempt {poll.attempt} timed out",
                            attempt=poll.attempt - 1,
                        )
                    delay = next(self._delays, None)
                    if delay is None:
                        log_structured(
                            logger,
                            logging.DEBUG,
                            f"No delay left after {self._attempts} attempts",
                            attempts=self._attempts,
                        )
                        raise ExhaustionError
                    self._start(poll.attempt, to_seconds(delay))
                elif poll.kind is PollKind.PENDING:
                    await self._state.wait()
                else:
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Attempt {poll.attempt + 1} completed",
                        attempt=poll.attempt,
                    )
                    return poll.action.result()
        finally:
            self._state.clear()

    def _start(self, attempt: int, delay: float) -> None:
        log_structured(
            logger,
            logging.DEBUG,
            f"Starting attempt {attempt + 1} (delay={delay:.2f}s)",
            attempt=attempt,
            delay=delay,
        )
        self._attempts += 1
        # Timer awaitable before the factory call, action task before the
        # timer task.
        pending_timer = self._sleep(delay)
        try:
            action = asyncio.ensure_future(self._action(attempt))
        except BaseException:
            if inspect.iscoroutine(pending_timer):
                pending_timer.close()
            raise
        try:
            timer = asyncio.ensure_future(pending_timer)
        except BaseException:
            action.cancel()
            raise
        self._state.start(attempt, timer, action)

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(attempts={self._attempts}, attempt={self._state.attempt})"


async def retry(
    delays: Iterable[float | timedelta | None],
    action: Callable[[int], Awaitable[T]],
    *,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> T:
    """Retry an asynchronous action following a delay sequence.

    Args:
        delays: The delay sequence, e.g. ``[0.1, 0.2, 0.3]``,
            ``ExponentialBackoff().take(5)`` or a ``RetryConfig``.
        action: The action factory, called with the attempt index.
        sleep: Optional timer primitive. Defaults to ``asyncio.sleep``.

    Returns:
        The result of the first action that completed before its delay
        elapsed.

    Raises:
        ExhaustionError: If the delay sequence ended first.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry
        >>> from aretry.backoff import ConstantBackoff
        >>> async def ping(attempt):
        ...     return "pong"
        ...
        >>> asyncio.run(retry(ConstantBackoff(delay=1.0).take(3), ping))
        'pong'
        >>> asyncio.run(retry([], ping))
        Traceback (most recent call last):
        ...
        aretry.exceptions.ExhaustionError: chances have been run out

        ```
    """
    return await RetryDriver(delays, action, sleep=sleep)
