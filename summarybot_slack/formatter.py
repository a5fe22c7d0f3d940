# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Rendering of summaries as Slack mrkdwn."""

from typing import Sequence

THREAD_HEADER = "*Thread Summary*\n\n"
MESSAGE_HEADER = "*Message Summary*\n\n"


def escape_mrkdwn(text: str) -> str:
    """Escape the three characters Slack treats as control sequences."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def format_summary(topic: str, summary: str, action_items: Sequence[str]) -> str:
    """Render a summary body; the action item block is omitted when empty."""
    text = f"*Topic:* {escape_mrkdwn(topic)}\n\n*Summary:*\n{escape_mrkdwn(summary)}\n\n"
    if action_items:
        text += "*Action Items:*\n"
        for i, item in enumerate(action_items, start=1):
            text += f"{i}. {escape_mrkdwn(item)}\n"
    return text


def channel_header(channel_name: str) -> str:
    return f"*Summary of today's messages in #{escape_mrkdwn(channel_name)}*\n\n"
