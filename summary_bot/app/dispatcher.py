# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Bolt listeners for the slash command and the message shortcut."""

from concurrent.futures import Future
from typing import Any, Callable, Mapping

from summarybot_error_reporting import ErrorReporter
from summarybot_errors import NoContentError
from summarybot_logging import Logger
from summarybot_slack import MessageSource

from .background import BackgroundRunner
from .notices import RESPOND_FAILED_SUFFIX, describe_error
from .scope import ChannelNotFoundError
from .service import EphemeralNotifier, SummaryService
from .triggers import ShortcutTrigger, SlashCommandTrigger

MESSAGE_SHORTCUT_TYPE = "message_action"


class TriggerDispatcher:
    """Acknowledges triggers and hands the summary work to the background runner.

    Listeners call ``ack()`` before anything else and return right after
    submitting, so Slack always gets its acknowledgement in time. Every
    failure after that point reaches the user as an ephemeral notice.
    """

    def __init__(
        self,
        service: SummaryService,
        runner: BackgroundRunner,
        source: MessageSource,
        error_reporter: ErrorReporter,
        logger: Logger,
        command_name: str = "/summary-today",
        shortcut_callback_id: str = "summarize_thread",
    ):
        self.service = service
        self.runner = runner
        self.source = source
        self.error_reporter = error_reporter
        self.logger = logger
        self.command_name = command_name
        self.shortcut_callback_id = shortcut_callback_id

    def register(self, app) -> None:
        """Attach the listeners to a ``slack_bolt.App``."""
        app.command(self.command_name)(self.handle_command)
        app.shortcut(self.shortcut_callback_id)(self.handle_shortcut)
        self.logger.info(
            "Registered Slack listeners",
            command=self.command_name,
            shortcut=self.shortcut_callback_id,
        )

    def handle_command(self, ack: Callable[..., Any], command: Mapping[str, Any]) -> Future:
        ack()
        trigger = SlashCommandTrigger.from_payload(command)
        self.logger.info("Received slash command", argument=trigger.text, **trigger.context())

        notifier = EphemeralNotifier(
            self.source, trigger.channel_id, trigger.user_id, trigger.response_url, self.error_reporter
        )
        return self.runner.submit(
            "summarize_channel_today",
            self._run,
            self.service.summarize_channel_today,
            trigger,
            notifier,
            **trigger.context(),
        )

    def handle_shortcut(self, ack: Callable[..., Any], shortcut: Mapping[str, Any]) -> Future | None:
        ack()
        if shortcut.get("type") != MESSAGE_SHORTCUT_TYPE:
            self.logger.warning(
                "Ignoring shortcut that is not a message shortcut",
                shortcut_type=shortcut.get("type"),
                callback_id=shortcut.get("callback_id"),
            )
            return None

        trigger = ShortcutTrigger.from_payload(shortcut)
        self.logger.info("Received message shortcut", **trigger.context())

        notifier = EphemeralNotifier(
            self.source, trigger.channel_id, trigger.user_id, trigger.response_url, self.error_reporter
        )
        return self.runner.submit(
            "summarize_message",
            self._run,
            self.service.summarize_message,
            trigger,
            notifier,
            **trigger.context(),
        )

    def _run(self, job: Callable[..., str], trigger, notifier: EphemeralNotifier) -> str:
        try:
            return job(trigger, notifier)
        except NoContentError as e:
            self.logger.info("Nothing to summarize", notice=str(e), **trigger.context())
            notifier.notify(describe_error(e))
            return "no_content"
        except ChannelNotFoundError as e:
            self.logger.warning("Channel not found", channel_name=e.name, **trigger.context())
            notifier.notify(describe_error(e))
            return "channel_not_found"
        except Exception as e:
            self.logger.error(
                "Summary request failed",
                error_type=type(e).__name__,
                error=str(e),
                **trigger.context(),
            )
            self.error_reporter.report(e, context=trigger.context())
            notifier.notify(describe_error(e), fallback_suffix=RESPOND_FAILED_SUFFIX)
            raise
