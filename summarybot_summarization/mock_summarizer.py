# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Mock summarization implementation for testing."""

import logging
from typing import Sequence

from .models import SummaryResult
from .summarizer import Summarizer

logger = logging.getLogger(__name__)


class MockSummarizer(Summarizer):
    """Mock summarization engine for testing.

    Returns predictable summaries without calling external APIs and
    records every batch it was asked to summarize.
    """

    def __init__(self, topic: str = "Mock topic", action_items: Sequence[str] = ()):
        self.topic = topic
        self.action_items = tuple(action_items)
        self.calls: list[list[str]] = []
        logger.info("Initialized MockSummarizer")

    def summarize(self, texts: Sequence[str]) -> SummaryResult:
        self.calls.append(list(texts))
        if not texts:
            return SummaryResult.for_empty_input()

        return SummaryResult(
            topic=self.topic,
            summary=f"Summary of {len(texts)} messages.",
            action_items=self.action_items,
            llm_backend="mock",
            llm_model="mock",
        )
