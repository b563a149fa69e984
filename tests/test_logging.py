"""Tests for structured logging configuration."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog

from core.config import Settings
from core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _reset_context() -> Iterator[None]:
    """Leave no bound context behind."""
    clear_context()
    yield
    clear_context()


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_console_format(self) -> None:
        """Console output ends with the console renderer."""
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_format(self) -> None:
        """JSON output ends with the JSON renderer."""
        configure_logging(json_format=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    @pytest.mark.parametrize("level", ["DEBUG", "info", "WARNING"])
    def test_log_levels(self, level: str) -> None:
        """Any standard level name is accepted, in any case."""
        configure_logging(log_level=level)

        get_logger("test").info("message", key="value")


class TestConfigureFromSettings:
    """Tests for configure_from_settings."""

    def test_production_uses_json(self) -> None:
        """Production logs JSON lines."""
        with patch("core.logging.configure_logging") as mock_configure:
            configure_from_settings(Settings(environment="production", log_level="WARNING"))

        mock_configure.assert_called_once_with(json_format=True, log_level="WARNING")

    def test_debug_forces_debug_level(self) -> None:
        """Debug mode logs everything to the console."""
        with patch("core.logging.configure_logging") as mock_configure:
            configure_from_settings(Settings(environment="development", debug=True))

        mock_configure.assert_called_once_with(json_format=False, log_level="DEBUG")


class TestContextFunctions:
    """Tests for context binding functions."""

    def test_bind_context(self) -> None:
        """Bound values are visible in the context."""
        bind_context(request_id="req-123", user_id="user_admin_1")

        assert structlog.contextvars.get_contextvars() == {
            "request_id": "req-123",
            "user_id": "user_admin_1",
        }

    def test_clear_context(self) -> None:
        """clear_context removes everything."""
        bind_context(request_id="req-123")

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}

    def test_bound_context_reaches_log_lines(self) -> None:
        """Log events carry the bound context."""
        bind_context(request_id="req-123")

        event = structlog.contextvars.merge_contextvars(None, "info", {"event": "GST calculated"})

        assert event == {"request_id": "req-123", "event": "GST calculated"}
