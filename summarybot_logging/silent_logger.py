# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Silent logger implementation for testing."""

import threading
from typing import Any

from .logger import Logger


class SilentLogger(Logger):
    """Logger that keeps entries in memory and prints nothing.

    Does not filter by level; every entry is kept so tests can assert on it.
    Safe to use from the background runner's worker threads.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or "summary-bot"
        self.logs: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        kwargs.pop("exc_info", None)
        entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            entry["extra"] = kwargs
        with self._lock:
            self.logs.append(entry)

    def clear_logs(self) -> None:
        with self._lock:
            self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Get stored entries, optionally filtered by level."""
        with self._lock:
            if level is None:
                return list(self.logs)
            return [log for log in self.logs if log["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether any stored entry contains ``message`` (substring match)."""
        return any(message in log["message"] for log in self.get_logs(level))
