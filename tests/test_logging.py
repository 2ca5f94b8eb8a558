"""
Tests for structured logging setup.
"""

import json
import logging
from datetime import datetime, timezone

import pytest
import structlog

from token_auth.shared.logging import (
    add_correlation_context,
    add_service_context,
    clear_context,
    configure_logging,
    get_logger,
    set_request_id,
)


@pytest.fixture
def restore_logging():
    """Put structlog back to its defaults after configuring it."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    clear_context()


class TestProcessors:
    """Event dict processors."""

    def test_component_from_logger_name(self):
        """Test first segment of a dotted logger name."""
        event = add_service_context(None, "info", {"logger": "token_auth.verifier"})

        assert event["component"] == "token_auth"

    def test_correlation_context(self):
        """Test request id is attached only when set."""
        clear_context()
        assert "request_id" not in add_correlation_context(None, "info", {})

        request_id = set_request_id()
        try:
            assert add_correlation_context(None, "info", {})["request_id"] == request_id
        finally:
            clear_context()


class TestConfigureLogging:
    """End-to-end JSON output."""

    def test_renders_json(self, restore_logging, caplog):
        """Test configured logger emits JSON with service and request context."""
        configure_logging("token-auth", "debug")
        caplog.set_level(logging.DEBUG)
        set_request_id("req-42")

        get_logger("token_auth.verifier").info("Token verified", kid="foo")

        event = json.loads(caplog.records[-1].getMessage())
        assert event["event"] == "Token verified"
        assert event["kid"] == "foo"
        assert event["service"] == "token-auth"
        assert event["component"] == "token_auth"
        assert event["request_id"] == "req-42"
        assert event["level"] == "info"
        assert isinstance(event["timestamp"], str)
        assert event["timestamp"].startswith(str(datetime.now(timezone.utc).year))
