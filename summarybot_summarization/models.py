# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Data models for the summarization adapter."""

from dataclasses import dataclass, field

DEFAULT_TOPIC = "Discussion"
DEFAULT_SUMMARY = "No summary generated."


@dataclass(frozen=True)
class SummaryResult:
    """Structured summary produced for one request.

    Attributes:
        topic: Short phrase naming what the conversation is about
        summary: Two or three sentence summary of the discussion
        action_items: Follow-ups mentioned in the conversation, in order
        llm_backend: Backend that produced the result (e.g. "openai", "mock", "fallback")
        llm_model: Model used, if any
        tokens_prompt: Prompt tokens reported by the backend
        tokens_completion: Completion tokens reported by the backend
        latency_ms: Time spent in the backend call
    """
    topic: str
    summary: str
    action_items: tuple[str, ...] = ()
    llm_backend: str = field(default="unknown", compare=False)
    llm_model: str = field(default="unknown", compare=False)
    tokens_prompt: int = field(default=0, compare=False)
    tokens_completion: int = field(default=0, compare=False)
    latency_ms: int = field(default=0, compare=False)

    @classmethod
    def for_empty_input(cls) -> "SummaryResult":
        """Result returned when there is nothing to summarize."""
        return cls(
            topic="No topic",
            summary="No messages to summarize.",
            action_items=(),
            llm_backend="fallback",
        )

    @classmethod
    def for_unparseable_output(cls) -> "SummaryResult":
        """Result returned when the model's output is not a JSON object."""
        return cls(
            topic=DEFAULT_TOPIC,
            summary="Failed to parse the AI-generated summary.",
            action_items=(),
            llm_backend="fallback",
        )
