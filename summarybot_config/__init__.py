# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot Configuration Adapter.

Schema-driven configuration read once at process start into an immutable
``TypedConfig`` value.
"""

__version__ = "0.1.0"

from .base import ConfigProvider
from .credentials import check_credentials, validate_startup
from .env_provider import EnvConfigProvider
from .schema_loader import (
    ConfigSchema,
    ConfigSchemaError,
    ConfigValidationError,
    FieldSpec,
    SchemaConfigLoader,
)
from .static_provider import StaticConfigProvider
from .typed_config import TypedConfig, load_schema, load_typed_config

__all__ = [
    "__version__",
    # Configuration Providers
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    # Schema-driven configuration
    "ConfigSchema",
    "ConfigSchemaError",
    "ConfigValidationError",
    "FieldSpec",
    "SchemaConfigLoader",
    "load_schema",
    # Typed configuration
    "TypedConfig",
    "load_typed_config",
    # Startup checks
    "check_credentials",
    "validate_startup",
]
