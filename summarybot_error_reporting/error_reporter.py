# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Abstract error reporter interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ErrorReporter(ABC):
    """Destination for errors the bot handles instead of propagating.

    The dispatcher converts every failure into an ephemeral notice; before it
    does, the original exception and its trigger context are sent here.
    """

    @abstractmethod
    def report(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """Report an exception with optional context (channel_id, user_id, trigger, ...)."""

    @abstractmethod
    def capture_message(
        self,
        message: str,
        level: str = "error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Capture a message without an exception."""


def describe_exception(error: Exception) -> Dict[str, Any]:
    """Flatten an exception into reportable fields, including upstream metadata."""
    details: Dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    kind = getattr(error, "kind", None)
    if kind is not None:
        details["error_kind"] = getattr(kind, "value", kind)
    for attr in ("service", "code", "operation"):
        value = getattr(error, attr, None)
        if value is not None:
            details[f"upstream_{attr}"] = value
    return details
