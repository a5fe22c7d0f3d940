# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Immutable data types returned by the message source."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Message:
    """One Slack message.

    Attributes:
        id: Slack message timestamp id (e.g., "1700000000.000100")
        author: User id of the sender, empty for some bot or system messages
        text: Message text, possibly empty
        thread_id: Timestamp of the thread root, None for messages outside a thread
    """

    id: str
    author: str
    text: str
    thread_id: str | None = None

    @property
    def is_reply(self) -> bool:
        return self.thread_id is not None and self.thread_id != self.id

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Message":
        """Build a Message from a ``conversations.*`` message object."""
        return cls(
            id=payload.get("ts", ""),
            author=payload.get("user") or payload.get("bot_id") or "",
            text=payload.get("text") or "",
            thread_id=payload.get("thread_ts"),
        )


@dataclass(frozen=True)
class Channel:
    """A channel the bot can enumerate."""

    id: str
    name: str
