r"""Retry driver and its per-attempt state machine.

Public API:
    - retry: Create a RetryDriver from a delay sequence and an action factory
    - RetryDriver: Awaitable that races each attempt against its delay
    - RetryState: State of the current attempt
    - RetryPoll: Outcome of polling a RetryState
    - PollKind: Kinds of RetryPoll outcomes
"""

from __future__ import annotations

__all__ = ["PollKind", "RetryDriver", "RetryPoll", "RetryState", "retry"]

from aretry.retry.driver import RetryDriver, retry
from aretry.retry.state import PollKind, RetryPoll, RetryState
