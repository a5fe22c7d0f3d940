# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Parsing of the model's JSON output into a SummaryResult."""

import json

from summarybot_errors import MalformedModelOutput

from .models import DEFAULT_SUMMARY, DEFAULT_TOPIC, SummaryResult


def parse_summary_content(content: str) -> SummaryResult:
    """Parse the completion body into a SummaryResult.

    Missing or empty fields fall back to defaults: ``topic`` becomes
    "Discussion", ``summary`` becomes "No summary generated." and a
    non-list ``actionItems`` becomes empty.

    Raises:
        MalformedModelOutput: If ``content`` is not a JSON object
    """
    try:
        payload = json.loads(content)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedModelOutput(f"Model output is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedModelOutput(
            f"Model output must be a JSON object, got {type(payload).__name__}"
        )

    action_items = payload.get("actionItems")
    if not isinstance(action_items, list):
        action_items = []

    return SummaryResult(
        topic=str(payload.get("topic") or DEFAULT_TOPIC),
        summary=str(payload.get("summary") or DEFAULT_SUMMARY),
        action_items=tuple(str(item) for item in action_items if item is not None and item != ""),
    )
