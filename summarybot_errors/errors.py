# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Error taxonomy shared by the Slack and summarization adapters.

Adapters classify failures at the point they happen, using the upstream API's
structured error information, and raise one of the typed errors below. Callers
branch on the error type (or ``kind``) rather than on message text.
"""

from enum import Enum
from typing import Iterable, Optional


class ErrorKind(str, Enum):
    """Classification tag attached to every upstream error."""

    PERMISSION = "permission"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    GENERIC = "generic"


class SummaryBotError(Exception):
    """Base class for all errors raised by the bot."""


class ConfigurationError(SummaryBotError):
    """Raised when required credentials are missing at startup."""

    def __init__(self, missing: Iterable[str]):
        self.missing = sorted(missing)
        super().__init__(
            "Missing required configuration: " + ", ".join(self.missing)
        )


class UpstreamError(SummaryBotError):
    """Failure reported by Slack or the completion API.

    Attributes:
        service: Which upstream failed ("slack" or "openai")
        code: Structured error code from the upstream, when it provides one
        operation: The adapter operation that failed (e.g. "conversations.history")
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message)
        self.service = service
        self.code = code
        self.operation = operation

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(service={self.service!r}, code={self.code!r}, "
            f"operation={self.operation!r}, message={str(self)!r})"
        )


class UpstreamPermissionError(UpstreamError):
    """The bot is not a member of the channel, or lacks a required scope."""

    kind = ErrorKind.PERMISSION


class UpstreamAuthError(UpstreamError):
    """The credential is invalid, expired or revoked."""

    kind = ErrorKind.AUTH


class UpstreamRateLimitError(UpstreamError):
    """The upstream signalled a rate limit or exhausted quota."""

    kind = ErrorKind.RATE_LIMIT


class UpstreamGenericError(UpstreamError):
    """Any other upstream failure, including transport errors."""

    kind = ErrorKind.GENERIC


class MalformedModelOutput(SummaryBotError):
    """The completion API returned content that is not a JSON object.

    Recovered inside the summarization adapter; never reaches the user.
    """


class NoContentError(SummaryBotError):
    """Nothing was found to summarize. Not treated as a failure."""
