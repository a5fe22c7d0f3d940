# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Console-based error reporter implementation."""

import logging
import traceback
from typing import Any

from .error_reporter import ErrorReporter, describe_exception

logger = logging.getLogger(__name__)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def _format_context(context: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in context.items())


class ConsoleErrorReporter(ErrorReporter):
    """Writes reported errors through Python's logging system."""

    def __init__(self, logger_name: str | None = None):
        self.logger = logging.getLogger(logger_name) if logger_name else logger

    def report(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        fields = describe_exception(error)
        if context:
            fields.update(context)

        self.logger.error(
            "Exception occurred: %s: %s | Context: %s",
            fields["error_type"],
            fields["error_message"],
            _format_context(fields),
        )
        stack_trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self.logger.debug("Stack trace:\n%s", stack_trace)

    def capture_message(
        self,
        message: str,
        level: str = "error",
        context: dict[str, Any] | None = None,
    ) -> None:
        if context:
            message = f"{message} | Context: {_format_context(context)}"
        self.logger.log(_LEVELS.get(level.lower(), logging.ERROR), message)
