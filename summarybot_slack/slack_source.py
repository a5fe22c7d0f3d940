# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Web API implementation of MessageSource."""

import logging
from typing import Any, Callable

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.webhook import WebhookClient

from summarybot_errors import (
    UpstreamAuthError,
    UpstreamError,
    UpstreamGenericError,
    UpstreamPermissionError,
    UpstreamRateLimitError,
)

from .models import Channel, Message
from .source import MessageSource

logger = logging.getLogger(__name__)

SERVICE_NAME = "slack"
HISTORY_PAGE_LIMIT = 1000
CHANNEL_PAGE_LIMIT = 200
PUBLIC_CHANNEL_TYPES = "public_channel"
ALL_CHANNEL_TYPES = "public_channel,private_channel"

PERMISSION_CODES = frozenset({
    "not_in_channel",
    "channel_not_found",
    "missing_scope",
    "no_permission",
    "restricted_action",
})
AUTH_CODES = frozenset({
    "invalid_auth",
    "not_authed",
    "account_inactive",
    "token_revoked",
    "token_expired",
})
RATE_LIMIT_CODES = frozenset({"ratelimited"})


def classify_slack_error(error: SlackApiError, operation: str) -> UpstreamError:
    """Map a SlackApiError onto the upstream error taxonomy by its ``error`` code."""
    code = None
    response = getattr(error, "response", None)
    if response is not None:
        code = response.get("error")

    message = code or str(error)
    if code in PERMISSION_CODES:
        return UpstreamPermissionError(message, service=SERVICE_NAME, code=code, operation=operation)
    if code in AUTH_CODES:
        return UpstreamAuthError(message, service=SERVICE_NAME, code=code, operation=operation)
    if code in RATE_LIMIT_CODES:
        return UpstreamRateLimitError(message, service=SERVICE_NAME, code=code, operation=operation)
    return UpstreamGenericError(message, service=SERVICE_NAME, code=code, operation=operation)


class SlackMessageSource(MessageSource):
    """MessageSource backed by ``slack_sdk.WebClient``.

    Attributes:
        client: Authenticated WebClient
    """

    def __init__(
        self,
        client: WebClient,
        webhook_factory: Callable[[str], WebhookClient] = WebhookClient,
    ):
        self.client = client
        self._webhook_factory = webhook_factory

    def _call(self, operation: str, method: Callable[..., Any], **kwargs: Any) -> Any:
        try:
            return method(**kwargs)
        except SlackApiError as e:
            error = classify_slack_error(e, operation)
            logger.warning("Slack %s failed: %s", operation, error.code or str(e))
            raise error from e
        except (SlackClientError, OSError) as e:
            logger.warning("Slack %s transport failure: %s", operation, str(e))
            raise UpstreamGenericError(str(e), service=SERVICE_NAME, operation=operation) from e

    def fetch_window(self, channel_id: str, start: float, end: float) -> list[Message]:
        response = self._call(
            "conversations.history",
            self.client.conversations_history,
            channel=channel_id,
            oldest=str(start),
            latest=str(end),
            inclusive=True,
            limit=HISTORY_PAGE_LIMIT,
        )
        messages = [Message.from_api(m) for m in response.get("messages", [])]
        # history is newest first
        messages.reverse()
        logger.debug("Fetched %d messages from %s", len(messages), channel_id)
        return messages

    def fetch_thread(self, channel_id: str, root_id: str) -> list[Message]:
        response = self._call(
            "conversations.replies",
            self.client.conversations_replies,
            channel=channel_id,
            ts=root_id,
            limit=HISTORY_PAGE_LIMIT,
        )
        return [Message.from_api(m) for m in response.get("messages", [])]

    def fetch_message(self, channel_id: str, message_id: str) -> Message | None:
        response = self._call(
            "conversations.history",
            self.client.conversations_history,
            channel=channel_id,
            latest=message_id,
            inclusive=True,
            limit=1,
        )
        for payload in response.get("messages", []):
            if payload.get("ts") == message_id:
                return Message.from_api(payload)
        return None

    def resolve_timezone_offset(self, user_id: str) -> int:
        try:
            response = self._call("users.info", self.client.users_info, user=user_id)
        except UpstreamError as e:
            logger.warning("Could not resolve timezone for %s, using UTC: %s", user_id, str(e))
            return 0
        user = response.get("user") or {}
        try:
            return int(user.get("tz_offset") or 0)
        except (TypeError, ValueError):
            return 0

    def post(self, channel_id: str, text: str, thread_id: str | None = None) -> str:
        kwargs: dict[str, Any] = {"channel": channel_id, "text": text}
        if thread_id:
            kwargs["thread_ts"] = thread_id
        response = self._call("chat.postMessage", self.client.chat_postMessage, **kwargs)
        return response.get("ts", "")

    def post_ephemeral(self, channel_id: str, user_id: str, text: str) -> None:
        self._call(
            "chat.postEphemeral",
            self.client.chat_postEphemeral,
            channel=channel_id,
            user=user_id,
            text=text,
        )

    def respond(self, response_url: str, text: str, replace_original: bool = True) -> None:
        webhook = self._webhook_factory(response_url)
        try:
            response = webhook.send(
                text=text,
                response_type="ephemeral",
                replace_original=replace_original,
            )
        except (SlackClientError, OSError) as e:
            raise UpstreamGenericError(str(e), service=SERVICE_NAME, operation="response_url") from e
        if response.status_code != 200:
            raise UpstreamGenericError(
                f"response_url returned {response.status_code}: {response.body}",
                service=SERVICE_NAME,
                operation="response_url",
            )

    def list_channels(self) -> list[Channel]:
        try:
            return self._list_channels(ALL_CHANNEL_TYPES)
        except UpstreamPermissionError as e:
            if e.code != "missing_scope":
                raise
            logger.warning("Cannot list private channels without groups:read; listing public channels only")
            return self._list_channels(PUBLIC_CHANNEL_TYPES)

    def _list_channels(self, types: str) -> list[Channel]:
        channels: list[Channel] = []
        cursor = None
        while True:
            kwargs: dict[str, Any] = {
                "types": types,
                "exclude_archived": True,
                "limit": CHANNEL_PAGE_LIMIT,
            }
            if cursor:
                kwargs["cursor"] = cursor
            response = self._call("conversations.list", self.client.conversations_list, **kwargs)
            for payload in response.get("channels", []):
                channels.append(Channel(id=payload["id"], name=payload.get("name", "")))
            cursor = (response.get("response_metadata") or {}).get("next_cursor") or None
            if not cursor:
                break
        return channels

    def get_channel_name(self, channel_id: str) -> str:
        response = self._call("conversations.info", self.client.conversations_info, channel=channel_id)
        return (response.get("channel") or {}).get("name") or channel_id
