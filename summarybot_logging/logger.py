# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Abstract structured logger interface."""

from abc import ABC, abstractmethod
from typing import Any

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Logger(ABC):
    """Structured logger.

    Every method takes a message plus arbitrary keyword fields, which the
    implementation records alongside the message (e.g. ``channel_id=...``).
    """

    @abstractmethod
    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        """Record one entry at ``level``."""

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR level with the active exception's traceback attached.

        Intended for use inside an ``except`` block.
        """
        kwargs.setdefault("exc_info", True)
        self._log("ERROR", message, **kwargs)
