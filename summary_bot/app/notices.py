# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Ephemeral notice texts and the mapping from errors to user guidance."""

from summarybot_errors import (
    NoContentError,
    UpstreamAuthError,
    UpstreamPermissionError,
    UpstreamRateLimitError,
)
from summarybot_slack import escape_mrkdwn

from .scope import ChannelNotFoundError

PROCESSING = ":hourglass: Processing your request..."
FETCHING_TODAY = ":hourglass: Fetching today's messages and generating summary..."
FETCHING_MESSAGES = ":hourglass: Fetching messages and generating summary..."
POSTED_AS_REPLY = ":white_check_mark: Summary generated and posted as a reply."
NO_MESSAGES_TODAY = "No messages found in the channel for today (based on your timezone)."
NO_CONTENT = "No message content found to summarize."
RESPOND_FAILED_SUFFIX = " (Failed to update original message)"

NOT_IN_CHANNEL = (
    "The bot is not in this channel. Please invite the bot to the channel first "
    "using `/invite @YourBotName`."
)
MISSING_SCOPE = (
    "The bot is missing required permissions. Please reinstall the app with all required scopes."
)
SLACK_AUTH_FAILED = "Authentication failed. Please check the bot token or reinstall the app."
SLACK_RATE_LIMITED = "Slack is rate limiting requests right now. Please try again in a minute."
OPENAI_RATE_LIMITED = (
    "OpenAI API quota exceeded or rate limited. Please try again later or check your API key settings."
)
OPENAI_AUTH_FAILED = "OpenAI authentication failed. Please check the OpenAI API key configuration."
OPENAI_PERMISSION_DENIED = (
    "The OpenAI API key does not have access to the configured model. "
    "Please check the API key settings."
)

MEMBERSHIP_CODES = frozenset({"not_in_channel", "channel_not_found"})


def posted_to_channel(channel_name: str) -> str:
    return f":white_check_mark: Summary generated and posted to #{escape_mrkdwn(channel_name)}."


def channel_not_found(name: str) -> str:
    return f"Channel #{escape_mrkdwn(name)} not found. Please provide a valid channel name or ID."


def describe_error(error: Exception) -> str:
    """Turn an error into the notice shown to the requesting user.

    Branches on the error's type, service and code, never on message text.
    """
    if isinstance(error, NoContentError):
        return str(error) or NO_CONTENT
    if isinstance(error, ChannelNotFoundError):
        return channel_not_found(error.name)

    if isinstance(error, UpstreamPermissionError):
        if error.service == "openai":
            return OPENAI_PERMISSION_DENIED
        if error.code in MEMBERSHIP_CODES:
            return NOT_IN_CHANNEL
        return MISSING_SCOPE
    if isinstance(error, UpstreamAuthError):
        return OPENAI_AUTH_FAILED if error.service == "openai" else SLACK_AUTH_FAILED
    if isinstance(error, UpstreamRateLimitError):
        return OPENAI_RATE_LIMITED if error.service == "openai" else SLACK_RATE_LIMITED
    return f"Error: {error}"
