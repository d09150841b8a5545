"""Tests for the logging processors."""
from __future__ import annotations

import logging

import pytest

from braindiff.shared.config import Settings
from braindiff.shared.logging import ServiceContext, quiet_loggers, render_error_chains
from braindiff.shared.result import wrap


class TestRenderErrorChains:
    """Tests for render_error_chains."""

    def test_wrapped_error_is_rendered(self) -> None:
        """Test that wrapped errors become their chain plus root cause."""
        error = wrap(wrap(ConnectionRefusedError("refused"), "connect"), "failed to load states")
        event = render_error_chains(None, "error", {"event": "Request failed", "error": error})
        assert event["error"] == "failed to load states: connect: refused"
        assert event["error_root_cause"] == "ConnectionRefusedError('refused')"

    def test_other_values_untouched(self) -> None:
        """Test that plain values and plain exceptions are left alone."""
        plain = OSError("denied")
        event = render_error_chains(None, "info", {"event": "x", "schema": "analytics", "cause": plain})
        assert event == {"event": "x", "schema": "analytics", "cause": plain}


class TestServiceContext:
    """Tests for ServiceContext."""

    def test_adds_fields(self) -> None:
        """Test that service fields are added to each event."""
        processor = ServiceContext({"app": "Braindiff", "environment": "staging"})
        event = processor(None, "info", {"event": "Starting Braindiff API"})
        assert event["app"] == "Braindiff"
        assert event["environment"] == "staging"

    def test_event_values_win(self) -> None:
        """Test that explicit event fields are not overwritten."""
        processor = ServiceContext({"environment": "production"})
        event = processor(None, "info", {"event": "x", "environment": "development"})
        assert event["environment"] == "development"


class TestQuietLoggers:
    """Tests for quiet_loggers."""

    @pytest.fixture(autouse=True)
    def _restore_levels(self):
        names = Settings().log_quiet_loggers
        before = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in before.items():
            logging.getLogger(name).setLevel(level)

    def test_default_names_are_quieted(self) -> None:
        """Test that the configured third-party loggers drop to WARNING."""
        names = Settings().log_quiet_loggers
        assert "asyncpg" in names
        quiet_loggers(names)
        assert all(logging.getLogger(name).level == logging.WARNING for name in names)
