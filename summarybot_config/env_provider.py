# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Environment-backed configuration provider."""

import os
from typing import Any, Mapping, Optional

from .base import ConfigProvider


class EnvConfigProvider(ConfigProvider):
    """Configuration provider that reads from environment variables.

    Empty strings are treated as unset so that ``FOO=`` in a ``.env`` file
    falls back to the schema default.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        value = self._environ.get(key)
        if value is None or value == "":
            return default
        return value
