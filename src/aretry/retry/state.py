r"""Per-attempt state machine of the retry driver.

A ``RetryState`` is either pending-start (no attempt in flight) or
in-flight (one attempt whose action and timer run as asyncio tasks).
Polling it tells the driver what to do next without suspending.
"""

from __future__ import annotations

__all__ = ["PollKind", "RetryPoll", "RetryState"]

import asyncio
import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class PollKind(enum.Enum):
    """Kinds of outcomes reported by ``RetryState.poll``."""

    START = "start"  # a new attempt must be started
    PENDING = "pending"  # neither the action nor the timer is done
    READY = "ready"  # the action is done


@dataclass(frozen=True)
class RetryPoll(Generic[T]):
    """Outcome of polling a ``RetryState``.

    Attributes:
        kind: What the driver has to do next.
        attempt: For ``START``, the index of the attempt to start. For
            ``PENDING`` and ``READY``, the index of the attempt in
            flight.
        action: For ``READY``, the finished action.
    """

    kind: PollKind
    attempt: int = 0
    action: asyncio.Future[T] | None = None


@dataclass
class _Attempt(Generic[T]):
    attempt: int
    timer: asyncio.Future[None]
    action: asyncio.Future[T]


def _discard_outcome(future: asyncio.Future) -> None:
    # Retrieve the outcome of an abandoned action so asyncio does not
    # report it as never retrieved.
    if not future.cancelled():
        future.exception()


class RetryState(Generic[T]):
    """State of the attempt currently driven by a ``RetryDriver``.

    The state owns the action and timer tasks of the attempt in flight.
    Starting a new attempt or clearing the state cancels them, so no
    abandoned attempt keeps running in the background. An action that
    must release resources when abandoned can do so in a ``finally``
    block or by handling ``asyncio.CancelledError``.

    Example:
        ```pycon
        >>> from aretry.retry import PollKind, RetryState
        >>> state = RetryState()
        >>> poll = state.poll()
        >>> poll.kind is PollKind.START, poll.attempt
        (True, 0)

        ```
    """

    def __init__(self) -> None:
        self._running: _Attempt[T] | None = None

    @property
    def attempt(self) -> int | None:
        """The index of the attempt in flight, or ``None`` if pending-
        start."""
        return None if self._running is None else self._running.attempt

    def poll(self) -> RetryPoll[T]:
        """Report what the driver has to do next.

        The action is checked before the timer, so an action that
        finishes in the same loop iteration as its timer still counts
        as a success.

        Returns:
            ``START(0)`` when pending-start, ``READY`` when the action
            is done, ``START(n + 1)`` when the timer of attempt ``n``
            elapsed, and ``PENDING`` otherwise.

        Raises:
            Exception: Any exception raised by the timer itself.
        """
        running = self._running
        if running is None:
            return RetryPoll(PollKind.START, attempt=0)
        if running.action.done():
            return RetryPoll(PollKind.READY, attempt=running.attempt, action=running.action)
        if running.timer.done():
            running.timer.result()
            return RetryPoll(PollKind.START, attempt=running.attempt + 1)
        return RetryPoll(PollKind.PENDING, attempt=running.attempt)

    def start(self, attempt: int, timer: asyncio.Future[None], action: asyncio.Future[T]) -> None:
        """Abandon the attempt in flight, if any, and track a new one.

        Args:
            attempt: The index of the new attempt.
            timer: The task sleeping for the delay of the attempt.
            action: The task running the action of the attempt.
        """
        self.clear()
        self._running = _Attempt(attempt=attempt, timer=timer, action=action)

    async def wait(self) -> None:
        """Suspend until the action or the timer in flight is done."""
        if self._running is None:
            return
        await asyncio.wait(
            (self._running.action, self._running.timer),
            return_when=asyncio.FIRST_COMPLETED,
        )

    def clear(self) -> None:
        """Cancel the attempt in flight and go back to pending-start."""
        running, self._running = self._running, None
        if running is None:
            return
        running.timer.cancel()
        if not running.action.done():
            running.action.add_done_callback(_discard_outcome)
            running.action.cancel()
