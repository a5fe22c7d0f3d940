# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot Error Reporting Adapter."""

from .console_error_reporter import ConsoleErrorReporter
from .error_reporter import ErrorReporter, describe_exception
from .silent_error_reporter import SilentErrorReporter

__version__ = "0.1.0"


def create_error_reporter(reporter_type: str = "console", logger_name: str | None = None) -> ErrorReporter:
    """Create an error reporter based on type.

    Args:
        reporter_type: "console" or "silent"
        logger_name: Logger name for the console reporter (optional)

    Raises:
        ValueError: If reporter_type is unknown
    """
    if reporter_type == "console":
        return ConsoleErrorReporter(logger_name=logger_name)
    if reporter_type == "silent":
        return SilentErrorReporter()
    raise ValueError(f"Unknown reporter type: {reporter_type}")


__all__ = [
    "__version__",
    "ErrorReporter",
    "ConsoleErrorReporter",
    "SilentErrorReporter",
    "create_error_reporter",
    "describe_exception",
]
