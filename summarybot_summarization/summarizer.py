# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Abstract base class for summarization engines."""

from abc import ABC, abstractmethod
from typing import Sequence

from .models import SummaryResult


class Summarizer(ABC):
    """Abstract base class for LLM-based summarization engines.

    Implementations must return ``SummaryResult.for_empty_input()`` for an
    empty batch without contacting any backend, and must recover from
    malformed model output locally rather than raising.
    """

    @abstractmethod
    def summarize(self, texts: Sequence[str]) -> SummaryResult:
        """Summarize a batch of message texts.

        Args:
            texts: Message texts, oldest first

        Returns:
            SummaryResult with topic, summary and action items

        Raises:
            UpstreamError: If the backend call fails
        """
        pass
