# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Tests for mapping errors to user notices."""

import pytest

from summary_bot.app import notices
from summary_bot.app.notices import describe_error
from summary_bot.app.scope import ChannelNotFoundError
from summarybot_errors import (
    NoContentError,
    UpstreamAuthError,
    UpstreamGenericError,
    UpstreamPermissionError,
    UpstreamRateLimitError,
)


class TestDescribeError:
    """Tests for describe_error."""

    def test_not_in_channel_gives_invite_guidance(self):
        error = UpstreamPermissionError("not_in_channel", service="slack", code="not_in_channel")

        text = describe_error(error)

        assert "/invite" in text
        assert text == notices.NOT_IN_CHANNEL

    def test_missing_scope(self):
        error = UpstreamPermissionError("missing_scope", service="slack", code="missing_scope")

        assert "reinstall the app with all required scopes" in describe_error(error)

    @pytest.mark.parametrize(
        "error,expected",
        [
            (UpstreamAuthError("invalid_auth", service="slack", code="invalid_auth"), notices.SLACK_AUTH_FAILED),
            (UpstreamAuthError("bad key", service="openai"), notices.OPENAI_AUTH_FAILED),
            (UpstreamRateLimitError("quota", service="openai"), notices.OPENAI_RATE_LIMITED),
            (UpstreamRateLimitError("ratelimited", service="slack", code="ratelimited"), notices.SLACK_RATE_LIMITED),
            (UpstreamPermissionError("denied", service="openai"), notices.OPENAI_PERMISSION_DENIED),
        ],
    )
    def test_by_kind_and_service(self, error, expected):
        assert describe_error(error) == expected

    def test_classification_ignores_message_text(self):
        """Test that a generic error mentioning a quota is not treated as a rate limit."""
        error = UpstreamGenericError("quota not_in_channel", service="openai")

        assert describe_error(error) == "Error: quota not_in_channel"

    def test_unexpected_exception(self):
        assert describe_error(RuntimeError("boom")) == "Error: boom"

    def test_no_content(self):
        assert describe_error(NoContentError(notices.NO_MESSAGES_TODAY)) == notices.NO_MESSAGES_TODAY
        assert describe_error(NoContentError()) == notices.NO_CONTENT

    def test_channel_not_found(self):
        assert describe_error(ChannelNotFoundError("nope")) == (
            "Channel #nope not found. Please provide a valid channel name or ID."
        )


class TestChannelNotices:
    """Channel names typed by the user are escaped before they reach mrkdwn."""

    def test_channel_not_found_escapes_name(self):
        assert notices.channel_not_found("<!here>") == (
            "Channel #&lt;!here&gt; not found. Please provide a valid channel name or ID."
        )

    def test_posted_to_channel_escapes_name(self):
        assert notices.posted_to_channel("a&b") == (
            ":white_check_mark: Summary generated and posted to #a&amp;b."
        )

    def test_plain_name_unchanged(self):
        assert notices.posted_to_channel("general").endswith("posted to #general.")
