# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""In-memory implementation of MessageSource for tests and local development."""

from dataclasses import dataclass

from .models import Channel, Message
from .source import MessageSource


@dataclass(frozen=True)
class PostedMessage:
    channel_id: str
    text: str
    thread_id: str | None
    id: str


@dataclass(frozen=True)
class EphemeralMessage:
    channel_id: str
    user_id: str
    text: str


@dataclass(frozen=True)
class Response:
    response_url: str
    text: str
    replace_original: bool


class FakeMessageSource(MessageSource):
    """Fake MessageSource with pre-configured data and recorded writes.

    Failures can be injected per operation name (the Slack API method, e.g.
    ``"conversations.history"`` or ``"response_url"``).

    Example:
        >>> source = FakeMessageSource()
        >>> source.add_message("C1", Message(id="1.0", author="U1", text="hi"))
        >>> source.fetch_window("C1", 0, 2)
        [Message(id='1.0', author='U1', text='hi', thread_id=None)]
    """

    def __init__(self) -> None:
        self._messages: dict[str, list[Message]] = {}
        self._threads: dict[tuple[str, str], list[Message]] = {}
        self._tz_offsets: dict[str, int] = {}
        self._channels: list[Channel] = []
        self._failures: dict[str, Exception] = {}
        self.posted: list[PostedMessage] = []
        self.ephemerals: list[EphemeralMessage] = []
        self.responses: list[Response] = []
        self.calls: list[str] = []

    def add_message(self, channel_id: str, message: Message) -> None:
        self._messages.setdefault(channel_id, []).append(message)

    def add_thread(self, channel_id: str, root_id: str, messages: list[Message]) -> None:
        self._threads[(channel_id, root_id)] = list(messages)

    def add_channel(self, channel: Channel) -> None:
        self._channels.append(channel)

    def set_timezone_offset(self, user_id: str, offset: int) -> None:
        self._tz_offsets[user_id] = offset

    def fail(self, operation: str, error: Exception) -> None:
        """Make every later call to ``operation`` raise ``error``."""
        self._failures[operation] = error

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self._failures:
            raise self._failures[operation]

    def fetch_window(self, channel_id: str, start: float, end: float) -> list[Message]:
        self._record("conversations.history")
        messages = [m for m in self._messages.get(channel_id, []) if start <= float(m.id) <= end]
        return sorted(messages, key=lambda m: float(m.id))

    def fetch_thread(self, channel_id: str, root_id: str) -> list[Message]:
        self._record("conversations.replies")
        return list(self._threads.get((channel_id, root_id), []))

    def fetch_message(self, channel_id: str, message_id: str) -> Message | None:
        self._record("conversations.history")
        for message in self._messages.get(channel_id, []):
            if message.id == message_id:
                return message
        return None

    def resolve_timezone_offset(self, user_id: str) -> int:
        try:
            self._record("users.info")
        except Exception:
            return 0
        return self._tz_offsets.get(user_id, 0)

    def post(self, channel_id: str, text: str, thread_id: str | None = None) -> str:
        self._record("chat.postMessage")
        message_id = f"{1000000 + len(self.posted)}.000000"
        self.posted.append(PostedMessage(channel_id, text, thread_id, message_id))
        return message_id

    def post_ephemeral(self, channel_id: str, user_id: str, text: str) -> None:
        self._record("chat.postEphemeral")
        self.ephemerals.append(EphemeralMessage(channel_id, user_id, text))

    def respond(self, response_url: str, text: str, replace_original: bool = True) -> None:
        self._record("response_url")
        self.responses.append(Response(response_url, text, replace_original))

    def list_channels(self) -> list[Channel]:
        self._record("conversations.list")
        return list(self._channels)

    def get_channel_name(self, channel_id: str) -> str:
        self._record("conversations.info")
        for channel in self._channels:
            if channel.id == channel_id:
                return channel.name
        return channel_id
