# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot Slack Adapter.

Reads channel history and threads, posts summaries and notices, and
classifies Slack API failures into typed upstream errors.
"""

from .fake_source import FakeMessageSource
from .formatter import (
    MESSAGE_HEADER,
    THREAD_HEADER,
    channel_header,
    escape_mrkdwn,
    format_summary,
)
from .models import Channel, Message
from .slack_source import SlackMessageSource, classify_slack_error
from .source import MessageSource
from .timewindow import local_midnight, today_window

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Message",
    "Channel",
    "MessageSource",
    "SlackMessageSource",
    "FakeMessageSource",
    "classify_slack_error",
    "local_midnight",
    "today_window",
    "format_summary",
    "escape_mrkdwn",
    "channel_header",
    "THREAD_HEADER",
    "MESSAGE_HEADER",
]
