# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Tests for the error reporting adapter."""

import logging

import pytest

from summarybot_error_reporting import (
    ConsoleErrorReporter,
    SilentErrorReporter,
    create_error_reporter,
    describe_exception,
)
from summarybot_errors import UpstreamPermissionError


class TestDescribeException:
    """Tests for describe_exception."""

    def test_plain_exception(self):
        details = describe_exception(ValueError("bad value"))

        assert details == {"error_type": "ValueError", "error_message": "bad value"}

    def test_upstream_metadata(self):
        """Test that upstream errors carry kind, service, code and operation."""
        error = UpstreamPermissionError(
            "not_in_channel", service="slack", code="not_in_channel", operation="conversations.history"
        )

        details = describe_exception(error)

        assert details["error_kind"] == "permission"
        assert details["upstream_service"] == "slack"
        assert details["upstream_code"] == "not_in_channel"
        assert details["upstream_operation"] == "conversations.history"


class TestSilentErrorReporter:
    """Tests for SilentErrorReporter."""

    def test_report_and_filter(self):
        reporter = SilentErrorReporter()
        reporter.report(ValueError("a"), context={"channel_id": "C1"})
        reporter.report(KeyError("b"))

        assert len(reporter.reported_errors) == 2
        value_errors = reporter.get_errors("ValueError")
        assert len(value_errors) == 1
        assert value_errors[0]["context"] == {"channel_id": "C1"}

    def test_capture_message_and_clear(self):
        reporter = SilentErrorReporter()
        reporter.capture_message("heads up", level="warning")

        assert reporter.captured_messages[0]["level"] == "warning"
        reporter.clear()
        assert reporter.captured_messages == []
        assert reporter.get_errors() == []


class TestConsoleErrorReporter:
    """Tests for ConsoleErrorReporter."""

    def test_report_logs_error_with_context(self, caplog):
        reporter = ConsoleErrorReporter(logger_name="test-reporter")

        with caplog.at_level(logging.ERROR, logger="test-reporter"):
            reporter.report(RuntimeError("boom"), context={"trigger": "command"})

        messages = [r.getMessage() for r in caplog.records]
        assert any("RuntimeError: boom" in m and "trigger=command" in m for m in messages)

    def test_capture_message_level(self, caplog):
        reporter = ConsoleErrorReporter(logger_name="test-reporter")

        with caplog.at_level(logging.INFO, logger="test-reporter"):
            reporter.capture_message("note", level="info")

        assert caplog.records[0].levelno == logging.INFO


class TestCreateErrorReporter:
    """Tests for the reporter factory."""

    def test_types(self):
        assert isinstance(create_error_reporter("console"), ConsoleErrorReporter)
        assert isinstance(create_error_reporter("silent"), SilentErrorReporter)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown reporter type"):
            create_error_reporter("sentry")
