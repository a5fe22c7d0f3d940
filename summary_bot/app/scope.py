# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Resolution of triggers into the set of messages to summarize."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from summarybot_errors import SummaryBotError
from summarybot_slack import Channel, MessageSource

logger = logging.getLogger(__name__)

CHANNEL_MENTION_RE = re.compile(r"^<#([CG][A-Z0-9]+)(?:\|([^>]*))?>$")
CHANNEL_ID_RE = re.compile(r"^[CG][A-Z0-9]{6,}$")


class ChannelNotFoundError(SummaryBotError):
    """No visible channel matches the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Channel #{name} not found")
        self.name = name


@dataclass(frozen=True)
class ChannelScope:
    channel_id: str
    window_start: float
    window_end: float


@dataclass(frozen=True)
class ThreadScope:
    channel_id: str
    root_id: str


@dataclass(frozen=True)
class SingleMessageScope:
    channel_id: str
    message_id: str


Scope = Union[ChannelScope, ThreadScope, SingleMessageScope]


@dataclass(frozen=True)
class SummaryRequest:
    """One trigger's request: what to summarize and who asked."""

    scope: Scope
    requesting_user: str


class ResolutionState(Enum):
    """Outcome of resolving a message shortcut's scope."""

    THREAD_REPLY = "thread_reply"
    THREAD_PARENT = "thread_parent"
    STANDALONE = "standalone"
    STANDALONE_FETCHED = "standalone_fetched"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolvedScope:
    """Result of scope resolution.

    Attributes:
        state: Terminal resolution state
        scope: The scope summarized, None when FAILED
        texts: Non-empty message texts, oldest first
        reply_thread_id: Thread root the summary is posted under
    """

    state: ResolutionState
    scope: Scope | None = None
    texts: tuple[str, ...] = ()
    reply_thread_id: str | None = None

    @property
    def failed(self) -> bool:
        return self.state is ResolutionState.FAILED


FAILED_SCOPE = ResolvedScope(state=ResolutionState.FAILED)


def resolve_message_scope(
    source: MessageSource,
    channel_id: str,
    message_id: str,
    thread_root_id: str | None = None,
    inline_text: str | None = None,
) -> ResolvedScope:
    """Decide what a message shortcut summarizes.

    A reply summarizes its whole thread; a thread parent with replies
    summarizes its thread; anything else summarizes the single message,
    using the shortcut's inline text when present.
    """
    if thread_root_id and thread_root_id != message_id:
        texts = _texts(source.fetch_thread(channel_id, thread_root_id))
        if not texts:
            return FAILED_SCOPE
        return ResolvedScope(
            state=ResolutionState.THREAD_REPLY,
            scope=ThreadScope(channel_id, thread_root_id),
            texts=texts,
            reply_thread_id=thread_root_id,
        )

    replies = source.fetch_thread(channel_id, message_id)
    if len(replies) > 1:
        texts = _texts(replies)
        if texts:
            return ResolvedScope(
                state=ResolutionState.THREAD_PARENT,
                scope=ThreadScope(channel_id, message_id),
                texts=texts,
                reply_thread_id=message_id,
            )

    single = SingleMessageScope(channel_id, message_id)
    if inline_text:
        return ResolvedScope(
            state=ResolutionState.STANDALONE,
            scope=single,
            texts=(inline_text,),
            reply_thread_id=message_id,
        )

    message = source.fetch_message(channel_id, message_id)
    if message is not None and message.text:
        return ResolvedScope(
            state=ResolutionState.STANDALONE_FETCHED,
            scope=single,
            texts=(message.text,),
            reply_thread_id=message_id,
        )

    return FAILED_SCOPE


def _texts(messages) -> tuple[str, ...]:
    return tuple(m.text for m in messages if m.text)


@dataclass(frozen=True)
class ChannelArgument:
    """Parsed ``/summary-today`` argument: exactly one of id or name is the lookup key."""

    channel_id: str | None = None
    name: str | None = None


def parse_channel_argument(text: str) -> ChannelArgument | None:
    """Parse a channel id, ``#name``, ``name`` or ``<#C123|name>``; None when empty."""
    text = (text or "").strip()
    if not text:
        return None

    mention = CHANNEL_MENTION_RE.match(text)
    if mention:
        return ChannelArgument(channel_id=mention.group(1), name=mention.group(2) or None)

    text = text.lstrip("#")
    if CHANNEL_ID_RE.match(text):
        return ChannelArgument(channel_id=text)
    return ChannelArgument(name=text)


def find_channel_by_name(source: MessageSource, name: str) -> Channel:
    """Look up a channel by exact, case-sensitive name; the first match wins.

    Raises:
        ChannelNotFoundError: If no visible channel has that name
    """
    matches = [c for c in source.list_channels() if c.name == name]
    if not matches:
        raise ChannelNotFoundError(name)
    if len(matches) > 1:
        logger.warning(
            "Channel name %s matches %d channels, using %s",
            name, len(matches), matches[0].id,
        )
    return matches[0]


def resolve_channel(
    source: MessageSource,
    argument_text: str,
    invoking_channel_id: str,
    default_channel: str,
) -> Channel:
    """Resolve the slash command argument to the channel to summarize.

    An empty argument means the invoking channel, or the default channel
    when the command was run from a direct message.
    """
    argument = parse_channel_argument(argument_text)
    if argument is None:
        if invoking_channel_id.startswith("D"):
            logger.info("Command invoked from a DM, using default channel %s", default_channel)
            argument = parse_channel_argument(default_channel) or ChannelArgument(
                channel_id=invoking_channel_id
            )
        else:
            argument = ChannelArgument(channel_id=invoking_channel_id)

    if argument.channel_id:
        name = argument.name or source.get_channel_name(argument.channel_id)
        return Channel(id=argument.channel_id, name=name)
    return find_channel_by_name(source, argument.name)
