# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Prompt templates sent to the completion API."""

from typing import Sequence

SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes Slack conversations very concisely, "
    "focusing on brevity and accuracy."
)

USER_PROMPT_TEMPLATE = """You are a helpful assistant that summarizes slack conversations.
Please analyze these Slack messages and provide:
1. A clear, concise topic that represents what this conversation is about (1-5 words)
2. A very brief summary of the main discussion points and decisions (2-3 sentences maximum)
3. A list of action items or follow-ups mentioned (if any)

Be extremely concise in the summary - focus only on the key points.

Here are the messages:
{messages}

Please respond in JSON format with these keys:
- "topic": a short phrase describing the main topic of discussion
- "summary": a very brief paragraph (2-3 sentences max) summarizing the key points
- "actionItems": an array of strings, each being an action item"""

MESSAGE_SEPARATOR = "\n\n"


def build_prompt(texts: Sequence[str]) -> str:
    """Embed message texts, separated by blank lines, in the instruction template."""
    return USER_PROMPT_TEMPLATE.format(messages=MESSAGE_SEPARATOR.join(texts))


def build_messages(texts: Sequence[str]) -> list[dict[str, str]]:
    """Build the chat-completion message list for ``texts``."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_prompt(texts)},
    ]
