"""Tests for Result pattern implementation."""

from __future__ import annotations

import pytest

from core.result import Failure, Result, Success, failure, success


def parse_amount(raw: str) -> Result[int, str]:
    """Parse a paise amount, failing on anything but digits."""
    if not raw.isdigit():
        return failure(f"not an amount: {raw}")
    return success(int(raw))


class TestSuccess:
    """Tests for Success class."""

    def test_flags(self) -> None:
        """Success reports success, not failure."""
        result = Success(42)

        assert result.is_success() is True
        assert result.is_failure() is False

    def test_unwrap_returns_value(self) -> None:
        """unwrap and unwrap_or both return the value."""
        result = Success("hello")

        assert result.unwrap() == "hello"
        assert result.unwrap_or("default") == "hello"

    def test_map_transforms_value(self) -> None:
        """map applies the function, and chains."""
        result = Success(5).map(lambda x: x * 2).map(lambda x: x + 1)

        assert result.unwrap() == 11

    def test_is_frozen(self) -> None:
        """Success cannot be modified."""
        result = Success(1)

        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestFailure:
    """Tests for Failure class."""

    def test_flags(self) -> None:
        """Failure reports failure, not success."""
        result = Failure("error")

        assert result.is_success() is False
        assert result.is_failure() is True

    def test_unwrap_raises_value_error(self) -> None:
        """unwrap raises with the error in the message."""
        result = Failure("something went wrong")

        with pytest.raises(ValueError, match="Cannot unwrap Failure: something went wrong"):
            result.unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        """unwrap_or returns the default."""
        result: Failure[str] = Failure("error")

        assert result.unwrap_or(42) == 42

    def test_map_returns_self(self) -> None:
        """map leaves a failure untouched."""
        result: Failure[str] = Failure("error")

        mapped = result.map(lambda x: str(x))

        assert mapped is result


class TestHelpers:
    """Tests for success() and failure()."""

    def test_success(self) -> None:
        """success() wraps a value."""
        assert success(42) == Success(42)

    def test_failure(self) -> None:
        """failure() wraps an error."""
        assert failure("error message") == Failure("error message")

    def test_branching_on_outcome(self) -> None:
        """Callers branch on is_success without try/except."""
        assert parse_amount("118000").unwrap() == 118000
        assert parse_amount("-1").is_failure()
        assert parse_amount("abc").unwrap_or(0) == 0
