r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import math

import pytest

from aretry.backoff import ExponentialBackoff


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(base_delay=1.0)
    assert backoff.calculate(0) == 1.0
    assert backoff.calculate(1) == 2.0
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(3) == 8.0


def test_exponential_backoff_factor() -> None:
    """Test that the n-th delay is base_delay * factor ** n."""
    backoff = ExponentialBackoff(base_delay=0.1, factor=1.5)
    for attempt, delay in enumerate(backoff.take(10)):
        assert delay == pytest.approx(0.1 * 1.5**attempt)


def test_exponential_backoff_with_max_delay() -> None:
    """Test exponential backoff with max_delay cap."""
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(3) == 5.0
    assert backoff.calculate(10) == 5.0


def test_exponential_backoff_default_values() -> None:
    """Test exponential backoff with default values."""
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 0.3
    assert backoff.factor == 2.0
    assert backoff.max_delay is None
    assert backoff.calculate(0) == 0.3


def test_exponential_backoff_factor_one_is_constant() -> None:
    """Test that a factor of 1 gives a constant sequence."""
    assert list(ExponentialBackoff(base_delay=0.5, factor=1.0).take(3)) == [0.5, 0.5, 0.5]


def test_exponential_backoff_overflow() -> None:
    """Test that growth past the float range gives inf."""
    assert math.isinf(ExponentialBackoff(base_delay=1.0).calculate(5000))


def test_exponential_backoff_overflow_with_max_delay() -> None:
    """Test that overflowing delays are capped by max_delay."""
    assert ExponentialBackoff(base_delay=1.0, max_delay=60.0).calculate(5000) == 60.0


def test_exponential_backoff_zero_base_delay() -> None:
    """Test exponential backoff with zero base_delay."""
    backoff = ExponentialBackoff(base_delay=0.0)
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(5000) == 0.0


def test_exponential_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialBackoff(base_delay=-1.0)


def test_exponential_backoff_invalid_factor() -> None:
    """Test that a factor below 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"factor must be >= 1"):
        ExponentialBackoff(factor=0.5)


def test_exponential_backoff_invalid_max_delay() -> None:
    """Test that non-positive max_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        ExponentialBackoff(max_delay=0)
