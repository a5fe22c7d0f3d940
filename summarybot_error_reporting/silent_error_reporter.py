# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Silent error reporter implementation for testing."""

import threading
from typing import Any

from .error_reporter import ErrorReporter, describe_exception


class SilentErrorReporter(ErrorReporter):
    """Stores reported errors in memory so tests can assert on them."""

    def __init__(self):
        self.reported_errors: list[dict[str, Any]] = []
        self.captured_messages: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    def report(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        entry = {"error": error, "context": context or {}}
        entry.update(describe_exception(error))
        with self._lock:
            self.reported_errors.append(entry)

    def capture_message(
        self,
        message: str,
        level: str = "error",
        context: dict[str, Any] | None = None,
    ) -> None:
        with self._lock:
            self.captured_messages.append({
                "message": message,
                "level": level,
                "context": context or {},
            })

    def get_errors(self, error_type: str | None = None) -> list[dict[str, Any]]:
        """Get reported errors, optionally filtered by exception class name."""
        with self._lock:
            if error_type:
                return [e for e in self.reported_errors if e["error_type"] == error_type]
            return list(self.reported_errors)

    def clear(self) -> None:
        with self._lock:
            self.reported_errors.clear()
            self.captured_messages.clear()
