# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot Logging Adapter.

Structured logging with pluggable backends.

Example:
    >>> from summarybot_logging import create_logger
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="summary-bot")
    >>> logger.info("Trigger acknowledged", trigger="command", channel_id="C123")
    >>>
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.info("Test message")
    >>> test_logger.has_log("Test")
    True
"""

__version__ = "0.1.0"

from .factory import create_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger
from .uvicorn_config import create_uvicorn_log_config

__all__ = [
    "__version__",
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    "create_uvicorn_log_config",
]
