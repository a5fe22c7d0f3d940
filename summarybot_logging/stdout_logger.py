# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Stdout logger implementation with structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import LEVELS, Logger

_STDLIB_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class StdoutLogger(Logger):
    """Logger that writes one JSON object per line to stdout.

    Entries are also forwarded to the stdlib logger of the same name so
    pytest's ``caplog`` and any attached handlers can observe them.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Minimum level written (DEBUG, INFO, WARNING, ERROR)
            name: Logger name included in every entry

        Raises:
            ValueError: If level is not recognised
        """
        self.level = level.upper()
        self.name = name or "summary-bot"

        if self.level not in LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(LEVELS)}")

        self._stdlib_logger = logging.getLogger(self.name)
        # Filtering happens in _log; let the stdlib logger inherit root config
        self._stdlib_logger.setLevel(logging.NOTSET)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _STDLIB_LEVELS[level] < _STDLIB_LEVELS[self.level]:
            return

        exc_info = kwargs.pop("exc_info", None)

        entry: dict[str, Any] = {
            "timestamp": utc_timestamp(),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            entry["extra"] = kwargs

        try:
            print(json.dumps(entry, default=str), file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": kwargs} if kwargs else None
        self._stdlib_logger.log(_STDLIB_LEVELS[level], message, exc_info=exc_info, extra=extra)
