# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Typed errors shared across the Slack Summary Bot packages."""

from .errors import (
    ConfigurationError,
    ErrorKind,
    MalformedModelOutput,
    NoContentError,
    SummaryBotError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamGenericError,
    UpstreamPermissionError,
    UpstreamRateLimitError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorKind",
    "SummaryBotError",
    "ConfigurationError",
    "UpstreamError",
    "UpstreamPermissionError",
    "UpstreamAuthError",
    "UpstreamRateLimitError",
    "UpstreamGenericError",
    "MalformedModelOutput",
    "NoContentError",
]
