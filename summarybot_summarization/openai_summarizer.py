# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""OpenAI-based summarization implementation."""

import logging
import time
from typing import Any, Sequence

import openai
from openai import OpenAI

from summarybot_errors import (
    MalformedModelOutput,
    UpstreamAuthError,
    UpstreamGenericError,
    UpstreamPermissionError,
    UpstreamRateLimitError,
)

from .models import SummaryResult
from .parsing import parse_summary_content
from .prompts import build_messages
from .summarizer import Summarizer

logger = logging.getLogger(__name__)

SERVICE_NAME = "openai"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.5


def classify_openai_error(error: Exception, operation: str = "chat.completions.create") -> Exception:
    """Map an OpenAI client exception onto the upstream error taxonomy."""
    message = str(error)
    code = getattr(error, "code", None)

    if isinstance(error, openai.RateLimitError):
        return UpstreamRateLimitError(message, service=SERVICE_NAME, code=code, operation=operation)
    if isinstance(error, openai.AuthenticationError):
        return UpstreamAuthError(message, service=SERVICE_NAME, code=code, operation=operation)
    if isinstance(error, openai.PermissionDeniedError):
        return UpstreamPermissionError(message, service=SERVICE_NAME, code=code, operation=operation)
    return UpstreamGenericError(message, service=SERVICE_NAME, code=code, operation=operation)


class OpenAISummarizer(Summarizer):
    """OpenAI chat-completion summarization engine.

    Requests a JSON object response and parses it into a SummaryResult.

    Attributes:
        model: Model to use (e.g., "gpt-4o")
        temperature: Sampling temperature
        client: OpenAI client instance
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        client: Any | None = None,
    ):
        """Initialize OpenAI summarizer.

        Args:
            api_key: OpenAI API key
            model: Model to use for summarization
            temperature: Sampling temperature
            client: Pre-built client exposing ``chat.completions.create``;
                    an ``openai.OpenAI`` client is created when omitted
        """
        self.model = model
        self.temperature = temperature
        self.client = client if client is not None else OpenAI(api_key=api_key)
        logger.info("Initialized OpenAISummarizer with model: %s", model)

    def summarize(self, texts: Sequence[str]) -> SummaryResult:
        """Generate a summary using the OpenAI API.

        Raises:
            UpstreamError: If the API call fails or returns no content
        """
        if not texts:
            return SummaryResult.for_empty_input()

        start_time = time.time()
        logger.info("Summarizing %d messages with OpenAI model %s", len(texts), self.model)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=build_messages(texts),
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            logger.error("OpenAI request failed: %s", str(e))
            raise classify_openai_error(e) from e

        content = None
        if response.choices:
            content = response.choices[0].message.content
        if not content:
            raise UpstreamGenericError(
                "No content returned from OpenAI",
                service=SERVICE_NAME,
                operation="chat.completions.create",
            )

        latency_ms = int((time.time() - start_time) * 1000)
        usage = getattr(response, "usage", None)
        tokens_prompt = getattr(usage, "prompt_tokens", 0) or 0
        tokens_completion = getattr(usage, "completion_tokens", 0) or 0

        try:
            parsed = parse_summary_content(content)
        except MalformedModelOutput as e:
            logger.warning("Could not parse model output: %s", str(e))
            return SummaryResult.for_unparseable_output()

        logger.info(
            "Generated summary (prompt_tokens=%d, completion_tokens=%d, latency_ms=%d)",
            tokens_prompt, tokens_completion, latency_ms,
        )

        return SummaryResult(
            topic=parsed.topic,
            summary=parsed.summary,
            action_items=parsed.action_items,
            llm_backend=SERVICE_NAME,
            llm_model=self.model,
            tokens_prompt=tokens_prompt,
            tokens_completion=tokens_completion,
            latency_ms=latency_ms,
        )
