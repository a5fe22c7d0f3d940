# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Uvicorn logging configuration matching the bot's JSON log lines."""

import json
import logging
from typing import Any, Dict

from .stdout_logger import utc_timestamp


class JSONFormatter(logging.Formatter):
    """Formatter that renders stdlib log records in the StdoutLogger layout."""

    def __init__(self, logger_name: str = "uvicorn"):
        super().__init__()
        self.logger_name = logger_name

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": utc_timestamp(),
            "level": record.levelname,
            "logger": self.logger_name,
            "message": record.getMessage(),
        }
        extra = getattr(record, "extra", None)
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def create_uvicorn_log_config(service_name: str, log_level: str = "INFO") -> Dict[str, Any]:
    """Build a ``log_config`` dict for ``uvicorn.run``.

    Access logs are emitted at DEBUG so Slack's frequent webhook calls do not
    drown out the bot's own entries.

    Example:
        >>> uvicorn.run(app, port=3000, log_config=create_uvicorn_log_config("summary-bot"))
    """
    handler = {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "stream": "ext://sys.stdout",
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JSONFormatter,
                "logger_name": service_name,
            },
        },
        "handlers": {
            "console": handler,
        },
        "loggers": {
            "uvicorn": {"handlers": ["console"], "level": log_level, "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": log_level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": "DEBUG", "propagate": False},
        },
    }
