# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot Summarization Adapter.

Turns a batch of message texts into a topic, a short summary and a list
of action items using an LLM backend.
"""

from .factory import SummarizerFactory
from .mock_summarizer import MockSummarizer
from .models import SummaryResult
from .openai_summarizer import OpenAISummarizer, classify_openai_error
from .parsing import parse_summary_content
from .prompts import SYSTEM_PROMPT, build_messages, build_prompt
from .summarizer import Summarizer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Summarizer",
    "SummaryResult",
    "OpenAISummarizer",
    "MockSummarizer",
    "SummarizerFactory",
    "classify_openai_error",
    "parse_summary_content",
    "build_prompt",
    "build_messages",
    "SYSTEM_PROMPT",
]
