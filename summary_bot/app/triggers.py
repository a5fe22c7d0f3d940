# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Inbound trigger payloads parsed into immutable values."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SlashCommandTrigger:
    """A ``/summary-today [channel]`` invocation."""

    command: str
    text: str
    channel_id: str
    user_id: str
    response_url: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SlashCommandTrigger":
        return cls(
            command=payload.get("command", ""),
            text=(payload.get("text") or "").strip(),
            channel_id=payload.get("channel_id", ""),
            user_id=payload.get("user_id", ""),
            response_url=payload.get("response_url") or None,
        )

    def context(self) -> dict[str, Any]:
        return {
            "trigger": "command",
            "command": self.command,
            "channel_id": self.channel_id,
            "user_id": self.user_id,
        }


@dataclass(frozen=True)
class ShortcutTrigger:
    """A message shortcut invoked on one message.

    Attributes:
        thread_root_id: ``thread_ts`` of the message, when it is in a thread
        inline_text: Message text delivered with the payload, if any
    """

    callback_id: str
    channel_id: str
    user_id: str
    message_id: str
    thread_root_id: str | None = None
    inline_text: str | None = None
    response_url: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ShortcutTrigger":
        message = payload.get("message") or {}
        return cls(
            callback_id=payload.get("callback_id", ""),
            channel_id=(payload.get("channel") or {}).get("id", ""),
            user_id=(payload.get("user") or {}).get("id", ""),
            message_id=message.get("ts") or payload.get("message_ts", ""),
            thread_root_id=message.get("thread_ts"),
            inline_text=message.get("text") or None,
            response_url=payload.get("response_url") or None,
        )

    def context(self) -> dict[str, Any]:
        return {
            "trigger": "shortcut",
            "callback_id": self.callback_id,
            "channel_id": self.channel_id,
            "user_id": self.user_id,
            "message_id": self.message_id,
        }
