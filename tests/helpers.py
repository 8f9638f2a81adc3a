r"""Shared test helpers for driving retry runs step by step."""

from __future__ import annotations

__all__ = ["ManualTimers", "hang", "settle"]

import asyncio


async def settle(rounds: int = 10) -> None:
    """Let the event loop run every task that is ready."""
    for _ in range(rounds):
        await asyncio.sleep(0)


async def hang(*_: object) -> None:
    """Never complete, whatever the arguments."""
    await asyncio.Event().wait()


class ManualTimers:
    """Timer primitive whose timers elapse only when ``fire`` is called.

    Attributes:
        delays: The delay of every timer started, in order.
    """

    def __init__(self) -> None:
        self.delays: list[float] = []
        self._waiters: list[asyncio.Future[None]] = []

    async def sleep(self, delay: float) -> None:
        self.delays.append(delay)
        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        await waiter

    def fire(self, index: int) -> None:
        """Make the ``index``-th timer elapse."""
        self._waiters[index].set_result(None)

    def cancelled(self, index: int) -> bool:
        return self._waiters[index].cancelled()
