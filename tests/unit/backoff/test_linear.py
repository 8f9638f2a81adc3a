r"""Unit tests for LinearBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff import LinearBackoff


def test_linear_backoff_basic() -> None:
    """Test basic linear backoff calculation."""
    assert list(LinearBackoff(base_delay=1.0).take(4)) == [1.0, 2.0, 3.0, 4.0]


def test_linear_backoff_with_max_delay() -> None:
    """Test linear backoff with max_delay cap."""
    backoff = LinearBackoff(base_delay=2.0, max_delay=5.0)
    assert backoff.calculate(1) == 4.0
    assert backoff.calculate(5) == 5.0


def test_linear_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        LinearBackoff(base_delay=-0.1)
