# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Abstract interface for reading from and posting to Slack."""

from abc import ABC, abstractmethod

from .models import Channel, Message


class MessageSource(ABC):
    """Abstract interface over the Slack Web API operations the bot needs.

    Implementations return messages oldest first and raise typed
    ``UpstreamError`` subclasses on failure.
    """

    @abstractmethod
    def fetch_window(self, channel_id: str, start: float, end: float) -> list[Message]:
        """Fetch channel messages posted between ``start`` and ``end`` (epoch seconds).

        A single page of at most 1000 messages is returned.
        """
        ...

    @abstractmethod
    def fetch_thread(self, channel_id: str, root_id: str) -> list[Message]:
        """Fetch a thread; the root message is element 0."""
        ...

    @abstractmethod
    def fetch_message(self, channel_id: str, message_id: str) -> Message | None:
        """Fetch a single message by id, or None if it does not exist."""
        ...

    @abstractmethod
    def resolve_timezone_offset(self, user_id: str) -> int:
        """Return the user's UTC offset in seconds; 0 on any failure."""
        ...

    @abstractmethod
    def post(self, channel_id: str, text: str, thread_id: str | None = None) -> str:
        """Post a message and return its id."""
        ...

    @abstractmethod
    def post_ephemeral(self, channel_id: str, user_id: str, text: str) -> None:
        """Post a message visible only to ``user_id``."""
        ...

    @abstractmethod
    def respond(self, response_url: str, text: str, replace_original: bool = True) -> None:
        """Answer an interaction through its response URL."""
        ...

    @abstractmethod
    def list_channels(self) -> list[Channel]:
        """List non-archived channels visible to the bot, across all pages."""
        ...

    @abstractmethod
    def get_channel_name(self, channel_id: str) -> str:
        """Look up a channel's name."""
        ...
