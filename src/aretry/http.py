r"""Asynchronous HTTP requests driven by the retry driver.

Each attempt sends the request again. An attempt still waiting for its
response when its delay elapses is cancelled and the request is re-sent,
which gets a caller past stalled connections. Responses are returned
whatever their status code, and exceptions raised by httpx propagate
unchanged.
"""

from __future__ import annotations

__all__ = ["get_async", "request_async"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import RetryConfig
from aretry.retry.driver import retry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import timedelta

logger: logging.Logger = logging.getLogger(__name__)


async def request_async(
    method: str,
    url: str,
    *,
    delays: Iterable[float | timedelta] | None = None,
    client: httpx.AsyncClient | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request, re-sending it when a response is too slow.

    Args:
        method: The HTTP method name (e.g., "GET", "POST").
        url: The URL to request.
        delays: How long to wait for each attempt. Defaults to
            ``RetryConfig()``.
        client: Optional ``httpx.AsyncClient``. If not provided, a
            client is created for the duration of the call.
        **kwargs: Additional keyword arguments passed to
            ``client.request``.

    Returns:
        The first response received.

    Raises:
        ExhaustionError: If no attempt received a response in time.
        httpx.HTTPError: If the first attempt to complete failed.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.http import request_async
        >>> response = asyncio.run(
        ...     request_async("GET", "https://api.example.com/data", delays=[2.0, 5.0])
        ... )  # doctest: +SKIP

        ```
    """
    delays = delays if delays is not None else RetryConfig()
    if client is None:
        async with httpx.AsyncClient() as owned_client:
            return await _send(owned_client, method, url, delays, **kwargs)
    return await _send(client, method, url, delays, **kwargs)


async def _send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    delays: Iterable[float | timedelta],
    **kwargs: Any,
) -> httpx.Response:
    async def attempt_request(attempt: int) -> httpx.Response:
        logger.debug(f"{method} request to {url} (attempt {attempt + 1})")
        return await client.request(method, url, **kwargs)

    response = await retry(delays, attempt_request)
    logger.debug(f"{method} request to {url} returned status {response.status_code}")
    return response


async def get_async(
    url: str,
    *,
    delays: Iterable[float | timedelta] | None = None,
    client: httpx.AsyncClient | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send a GET request with ``request_async``."""
    return await request_async("GET", url, delays=delays, client=client, **kwargs)
