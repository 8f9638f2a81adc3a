from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from tests.helpers import ManualTimers


@pytest.fixture
def timers() -> ManualTimers:
    """Create a timer primitive whose timers only elapse on demand."""
    return ManualTimers()


@pytest.fixture
def mock_async_client() -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient for testing."""
    return Mock(spec=httpx.AsyncClient, request=AsyncMock(), aclose=AsyncMock())


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)
