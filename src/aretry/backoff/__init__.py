r"""Backoff strategies producing the delay sequence of a retry run.

Every strategy is an iterable of delays in seconds. Any other iterable
of non-negative numbers or ``timedelta`` values can be used in their
place, e.g. a plain list.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExplicitBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LinearBackoff",
    "NoBackoff",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.explicit import ExplicitBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fibonacci import FibonacciBackoff
from aretry.backoff.linear import LinearBackoff
from aretry.backoff.no_delay import NoBackoff
