# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Factory for creating summarizer instances based on configuration."""

import logging

from .mock_summarizer import MockSummarizer
from .openai_summarizer import DEFAULT_TEMPERATURE, OpenAISummarizer
from .summarizer import Summarizer

logger = logging.getLogger(__name__)


class SummarizerFactory:
    """Factory for creating summarizer instances."""

    @staticmethod
    def create_summarizer(
        provider: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> Summarizer:
        """Create a summarizer instance based on provider type.

        Args:
            provider: Provider type (required). Options: "openai", "mock"
            model: Model name to use. Required for openai.
            api_key: API key. Required for openai.
            temperature: Sampling temperature for openai

        Raises:
            ValueError: If provider is unknown or required config is missing
        """
        if not provider:
            raise ValueError(
                "provider parameter is required. "
                "Must be one of: openai, mock"
            )

        provider = provider.lower()
        logger.info("Creating summarizer with provider: %s", provider)

        if provider == "openai":
            if not api_key:
                raise ValueError(
                    "api_key parameter is required for OpenAI provider. "
                    "Provide the API key explicitly"
                )
            if not model:
                raise ValueError(
                    "model parameter is required for OpenAI provider. "
                    "Specify a model name (e.g., 'gpt-4o')"
                )
            return OpenAISummarizer(api_key=api_key, model=model, temperature=temperature)

        elif provider == "mock":
            return MockSummarizer()

        else:
            raise ValueError(
                f"Unknown provider: {provider}. "
                f"Supported providers: openai, mock"
            )
