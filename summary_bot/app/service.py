# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Main summary service implementation."""

import logging
import threading
import time
from typing import Any, Callable, Dict

from summarybot_error_reporting import ErrorReporter
from summarybot_errors import NoContentError, UpstreamError
from summarybot_slack import (
    MESSAGE_HEADER,
    THREAD_HEADER,
    MessageSource,
    channel_header,
    format_summary,
    today_window,
)
from summarybot_summarization import Summarizer, SummaryResult

from . import notices
from .scope import (
    ChannelNotFoundError,
    ChannelScope,
    SummaryRequest,
    ThreadScope,
    resolve_channel,
    resolve_message_scope,
)
from .triggers import ShortcutTrigger, SlashCommandTrigger

logger = logging.getLogger(__name__)


class EphemeralNotifier:
    """Sends notices visible only to the requesting user.

    Notices go through the interaction's response URL first and fall back to
    ``chat.postEphemeral``. A notice that fails on both paths is logged,
    captured by the error reporter when one is given, and dropped.
    """

    def __init__(
        self,
        source: MessageSource,
        channel_id: str,
        user_id: str,
        response_url: str | None = None,
        error_reporter: ErrorReporter | None = None,
    ):
        self.source = source
        self.channel_id = channel_id
        self.user_id = user_id
        self.response_url = response_url
        self.error_reporter = error_reporter

    def notify(self, text: str, fallback_suffix: str = "") -> bool:
        """Deliver ``text``; returns False when neither path succeeded."""
        fallback_text = text
        if self.response_url:
            try:
                self.source.respond(self.response_url, text, replace_original=True)
                return True
            except UpstreamError as e:
                logger.warning("response_url delivery failed, falling back to postEphemeral: %s", str(e))
                fallback_text = text + fallback_suffix

        try:
            self.source.post_ephemeral(self.channel_id, self.user_id, fallback_text)
            return True
        except UpstreamError as e:
            logger.error(
                "Dropping notice for user %s in %s, all delivery attempts failed: %s",
                self.user_id, self.channel_id, str(e),
            )
            if self.error_reporter is not None:
                self.error_reporter.capture_message(
                    "Dropped ephemeral notice",
                    level="warning",
                    context={
                        "channel_id": self.channel_id,
                        "user_id": self.user_id,
                        "error": str(e),
                    },
                )
            return False


class SummaryService:
    """Fetches a trigger's messages, summarizes them and posts the result."""

    def __init__(
        self,
        source: MessageSource,
        summarizer: Summarizer,
        default_channel: str = "general",
        clock: Callable[[], float] = time.time,
    ):
        """Initialize summary service.

        Args:
            source: Slack message source
            summarizer: Summarizer implementation (LLM backend)
            default_channel: Channel summarized when the command is run from a DM
            clock: Returns the current epoch time
        """
        self.source = source
        self.summarizer = summarizer
        self.default_channel = default_channel
        self.clock = clock
        self._lock = threading.Lock()

        # Stats
        self.summaries_posted = 0
        self.empty_requests = 0
        self.channels_not_found = 0
        self.summary_failures = 0
        self.last_processing_time = 0.0

    def summarize_channel_today(self, trigger: SlashCommandTrigger, notifier: EphemeralNotifier) -> str:
        """Summarize today's messages in the requested channel and post the summary there.

        Raises:
            ChannelNotFoundError: If the argument names no visible channel
            NoContentError: If the channel has no messages today
            UpstreamError: If Slack or the completion API fails
        """
        return self._track(self._summarize_channel_today, trigger, notifier)

    def summarize_message(self, trigger: ShortcutTrigger, notifier: EphemeralNotifier) -> str:
        """Summarize a thread or single message and post the summary as a thread reply.

        Raises:
            NoContentError: If there is no message content to summarize
            UpstreamError: If Slack or the completion API fails
        """
        return self._track(self._summarize_message, trigger, notifier)

    def _summarize_channel_today(self, trigger: SlashCommandTrigger, notifier: EphemeralNotifier) -> str:
        notifier.notify(notices.PROCESSING)

        channel = resolve_channel(
            self.source,
            trigger.text,
            trigger.channel_id,
            self.default_channel,
        )
        logger.info("Summarizing today's messages in %s (%s)", channel.name, channel.id)
        notifier.notify(notices.FETCHING_TODAY)

        offset = self.source.resolve_timezone_offset(trigger.user_id)
        start, end = today_window(self.clock(), offset)
        request = SummaryRequest(
            scope=ChannelScope(channel.id, start, end),
            requesting_user=trigger.user_id,
        )

        messages = self.source.fetch_window(channel.id, start, end)
        texts = [m.text for m in messages if m.text]
        if not texts:
            raise NoContentError(notices.NO_MESSAGES_TODAY)

        result = self._summarize(request, texts)
        self.source.post(channel.id, channel_header(channel.name) + self._body(result))
        notifier.notify(notices.posted_to_channel(channel.name))
        return "posted"

    def _summarize_message(self, trigger: ShortcutTrigger, notifier: EphemeralNotifier) -> str:
        notifier.notify(notices.FETCHING_MESSAGES)

        resolved = resolve_message_scope(
            self.source,
            trigger.channel_id,
            trigger.message_id,
            thread_root_id=trigger.thread_root_id,
            inline_text=trigger.inline_text,
        )
        logger.info("Resolved message scope for %s: %s", trigger.message_id, resolved.state.value)
        if resolved.failed:
            raise NoContentError(notices.NO_CONTENT)

        request = SummaryRequest(scope=resolved.scope, requesting_user=trigger.user_id)
        result = self._summarize(request, list(resolved.texts))

        header = THREAD_HEADER if isinstance(resolved.scope, ThreadScope) else MESSAGE_HEADER
        self.source.post(trigger.channel_id, header + self._body(result), thread_id=resolved.reply_thread_id)
        notifier.notify(notices.POSTED_AS_REPLY)
        return "posted"

    def _summarize(self, request: SummaryRequest, texts: list[str]) -> SummaryResult:
        logger.info(
            "Generating summary of %d messages for %s (%s)",
            len(texts), request.requesting_user, type(request.scope).__name__,
        )
        return self.summarizer.summarize(texts)

    @staticmethod
    def _body(result: SummaryResult) -> str:
        return format_summary(result.topic, result.summary, result.action_items)

    def _track(self, fn: Callable[..., str], *args: Any) -> str:
        start_time = time.time()
        try:
            outcome = fn(*args)
        except NoContentError:
            with self._lock:
                self.empty_requests += 1
            raise
        except ChannelNotFoundError:
            with self._lock:
                self.channels_not_found += 1
            raise
        except Exception:
            with self._lock:
                self.summary_failures += 1
            raise
        finally:
            with self._lock:
                self.last_processing_time = time.time() - start_time

        with self._lock:
            self.summaries_posted += 1
        return outcome

    def get_stats(self) -> Dict[str, Any]:
        """Get service statistics."""
        with self._lock:
            return {
                "summaries_posted": self.summaries_posted,
                "empty_requests": self.empty_requests,
                "channels_not_found": self.channels_not_found,
                "summary_failures": self.summary_failures,
                "last_processing_time_seconds": self.last_processing_time,
            }
