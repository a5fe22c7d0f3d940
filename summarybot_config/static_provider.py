# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Static/dictionary-backed configuration provider."""

from typing import Any

from .base import ConfigProvider


class StaticConfigProvider(ConfigProvider):
    """Configuration provider with static values (useful for tests)."""

    def __init__(self, config: dict[str, Any] | None = None):
        self._config = dict(config) if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)
