# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Tests for TriggerDispatcher and trigger payload parsing."""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from summary_bot.app import notices
from summary_bot.app.background import BackgroundRunner
from summary_bot.app.dispatcher import TriggerDispatcher
from summary_bot.app.service import SummaryService
from summary_bot.app.triggers import ShortcutTrigger, SlashCommandTrigger
from summarybot_errors import UpstreamGenericError, UpstreamPermissionError, UpstreamRateLimitError
from summarybot_slack import Message

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc).timestamp()
RESPONSE_URL = "https://hooks.slack.test/commands/1"


def command_payload(text="", channel_id="C0GENERAL1"):
    return {
        "command": "/summary-today",
        "text": text,
        "channel_id": channel_id,
        "user_id": "U1",
        "response_url": RESPONSE_URL,
    }


def shortcut_payload(**message):
    return {
        "type": "message_action",
        "callback_id": "summarize_thread",
        "channel": {"id": "C0RANDOM01"},
        "user": {"id": "U1"},
        "message": message,
        "response_url": RESPONSE_URL,
    }


@pytest.fixture
def runner(silent_logger):
    runner = BackgroundRunner(max_workers=2, logger=silent_logger)
    yield runner
    runner.shutdown(wait=True)


@pytest.fixture
def dispatcher(fake_source, mock_summarizer, runner, error_reporter, silent_logger):
    service = SummaryService(fake_source, mock_summarizer, default_channel="general", clock=lambda: NOW)
    return TriggerDispatcher(
        service=service,
        runner=runner,
        source=fake_source,
        error_reporter=error_reporter,
        logger=silent_logger,
    )


class TestHandleCommand:
    """Tests for the slash command listener."""

    def test_acks_before_any_upstream_call(self, dispatcher, fake_source):
        calls_at_ack = []
        ack = Mock(side_effect=lambda *a, **k: calls_at_ack.append(list(fake_source.calls)))
        fake_source.add_message("C0GENERAL1", Message(id="1710054000.000000", author="U2", text="hello"))

        future = dispatcher.handle_command(ack=ack, command=command_payload())

        assert future.result(timeout=5) == "posted"
        ack.assert_called_once()
        assert calls_at_ack == [[]]
        assert fake_source.posted[0].channel_id == "C0GENERAL1"

    def test_upstream_failure_becomes_notice(self, dispatcher, fake_source, error_reporter, runner, silent_logger):
        fake_source.fail(
            "conversations.history",
            UpstreamPermissionError("not_in_channel", service="slack", code="not_in_channel"),
        )

        future = dispatcher.handle_command(ack=Mock(), command=command_payload())

        with pytest.raises(UpstreamPermissionError):
            future.result(timeout=5)
        runner.shutdown(wait=True)

        assert fake_source.responses[-1].text == notices.NOT_IN_CHANNEL
        assert fake_source.posted == []
        reported = error_reporter.get_errors("UpstreamPermissionError")
        assert reported[0]["context"]["trigger"] == "command"
        assert silent_logger.has_log("Background task failed", level="ERROR")

    def test_rate_limit_from_summarizer(self, dispatcher, fake_source, mock_summarizer):
        fake_source.add_message("C0GENERAL1", Message(id="1710054000.000000", author="U2", text="hello"))
        mock_summarizer.summarize = Mock(side_effect=UpstreamRateLimitError("quota", service="openai"))

        future = dispatcher.handle_command(ack=Mock(), command=command_payload())

        with pytest.raises(UpstreamRateLimitError):
            future.result(timeout=5)
        assert fake_source.responses[-1].text == notices.OPENAI_RATE_LIMITED

    def test_empty_window_is_calm(self, dispatcher, fake_source, error_reporter):
        future = dispatcher.handle_command(ack=Mock(), command=command_payload())

        assert future.result(timeout=5) == "no_content"
        assert fake_source.responses[-1].text == notices.NO_MESSAGES_TODAY
        assert error_reporter.get_errors() == []

    def test_undeliverable_notices_are_captured(self, dispatcher, fake_source, error_reporter):
        fake_source.fail("response_url", UpstreamGenericError("expired_url", service="slack"))
        fake_source.fail(
            "chat.postEphemeral",
            UpstreamPermissionError("not_in_channel", service="slack", code="not_in_channel"),
        )

        future = dispatcher.handle_command(ack=Mock(), command=command_payload())

        assert future.result(timeout=5) == "no_content"
        captured = error_reporter.captured_messages
        assert captured
        assert all(m["message"] == "Dropped ephemeral notice" for m in captured)
        assert captured[-1]["level"] == "warning"
        assert captured[-1]["context"]["channel_id"] == "C0GENERAL1"
        assert captured[-1]["context"]["user_id"] == "U1"

    def test_unknown_channel(self, dispatcher, fake_source):
        future = dispatcher.handle_command(ack=Mock(), command=command_payload(text="#missing"))

        assert future.result(timeout=5) == "channel_not_found"
        assert fake_source.responses[-1].text == (
            "Channel #missing not found. Please provide a valid channel name or ID."
        )


class TestHandleShortcut:
    """Tests for the message shortcut listener."""

    def test_standalone_message(self, dispatcher, fake_source, mock_summarizer):
        ack = Mock()

        future = dispatcher.handle_shortcut(ack=ack, shortcut=shortcut_payload(ts="200.0", text="hello"))

        assert future.result(timeout=5) == "posted"
        ack.assert_called_once()
        assert mock_summarizer.calls == [["hello"]]
        assert fake_source.posted[0].thread_id == "200.0"
        assert fake_source.responses[-1].text == notices.POSTED_AS_REPLY

    def test_no_content(self, dispatcher, fake_source):
        future = dispatcher.handle_shortcut(ack=Mock(), shortcut=shortcut_payload(ts="300.0"))

        assert future.result(timeout=5) == "no_content"
        assert fake_source.responses[-1].text == notices.NO_CONTENT

    def test_global_shortcut_ignored(self, dispatcher, fake_source, silent_logger):
        ack = Mock()

        result = dispatcher.handle_shortcut(ack=ack, shortcut={"type": "shortcut", "callback_id": "summarize_thread"})

        assert result is None
        ack.assert_called_once()
        assert fake_source.calls == []
        assert silent_logger.has_log("Ignoring shortcut", level="WARNING")


class TestRegister:
    """Tests for listener registration."""

    def test_register(self, dispatcher):
        app = Mock()

        dispatcher.register(app)

        app.command.assert_called_once_with("/summary-today")
        app.command.return_value.assert_called_once_with(dispatcher.handle_command)
        app.shortcut.assert_called_once_with("summarize_thread")
        app.shortcut.return_value.assert_called_once_with(dispatcher.handle_shortcut)


class TestTriggerParsing:
    """Tests for trigger payload parsing."""

    def test_slash_command(self):
        trigger = SlashCommandTrigger.from_payload(command_payload(text="  #general "))

        assert trigger.text == "#general"
        assert trigger.response_url == RESPONSE_URL
        assert trigger.context()["trigger"] == "command"

    def test_shortcut_in_thread(self):
        trigger = ShortcutTrigger.from_payload(shortcut_payload(ts="100.2", thread_ts="100.0", text="reply"))

        assert trigger.message_id == "100.2"
        assert trigger.thread_root_id == "100.0"
        assert trigger.inline_text == "reply"
        assert trigger.channel_id == "C0RANDOM01"

    def test_shortcut_without_text(self):
        trigger = ShortcutTrigger.from_payload(shortcut_payload(ts="100.0", text=""))

        assert trigger.inline_text is None
        assert trigger.thread_root_id is None
