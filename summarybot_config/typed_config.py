# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Typed, immutable configuration value for the bot."""

import os
from types import MappingProxyType
from typing import Any, Dict, Iterable, Optional

from .base import ConfigProvider
from .schema_loader import ConfigSchema, SchemaConfigLoader, resolve_schema_dir

REDACTED = "***"


class TypedConfig:
    """Read-only configuration with attribute-only access.

    Built once at process entry and passed by reference into every component
    constructor. Dictionary-style access is intentionally not supported so
    that every key read is visible to static analysis.

    Example:
        >>> config = load_typed_config()
        >>> config.default_summary_channel
        'general'
        >>> config["default_summary_channel"]
        TypeError: TypedConfig does not support dict-style access
    """

    def __init__(
        self,
        config_dict: Dict[str, Any],
        schema_version: Optional[str] = None,
        secret_fields: Iterable[str] = (),
        credential_fields: Optional[Dict[str, str]] = None,
    ):
        object.__setattr__(self, "_config", MappingProxyType(dict(config_dict)))
        object.__setattr__(self, "_schema_version", schema_version)
        object.__setattr__(self, "_secret_fields", frozenset(secret_fields))
        object.__setattr__(
            self, "_credential_fields", MappingProxyType(dict(credential_fields or {}))
        )

    def get_schema_version(self) -> Optional[str]:
        return object.__getattribute__(self, "_schema_version")

    def get_secret_fields(self) -> frozenset:
        return object.__getattribute__(self, "_secret_fields")

    def get_credential_fields(self) -> Dict[str, str]:
        """Map of credential field name to the environment variable that sets it."""
        return dict(object.__getattribute__(self, "_credential_fields"))

    def is_production(self) -> bool:
        """True when the ``environment`` setting names a production deployment."""
        config = object.__getattribute__(self, "_config")
        return str(config.get("environment") or "").lower() in ("production", "prod")

    def redacted(self) -> Dict[str, Any]:
        """Return a plain dict safe for logging, with secret values masked."""
        config = object.__getattribute__(self, "_config")
        secrets = self.get_secret_fields()
        return {
            key: (REDACTED if key in secrets and value else value)
            for key, value in sorted(config.items())
        }

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        config = object.__getattribute__(self, "_config")
        if name not in config:
            raise AttributeError(
                f"Configuration key '{name}' not found. "
                f"Available keys: {sorted(config.keys())}"
            )
        return config[name]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"Cannot modify configuration. '{name}' is read-only. "
            "Configuration is immutable after loading."
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete configuration key '{name}'.")

    def __getitem__(self, key: str) -> Any:
        raise TypeError(
            f"TypedConfig does not support dict-style access (config['{key}']). "
            f"Use attribute-style instead: config.{key}"
        )

    def __repr__(self) -> str:
        return f"TypedConfig({self.redacted()!r})"

    def __dir__(self) -> list:
        config = object.__getattribute__(self, "_config")
        return sorted(config.keys())


def load_schema(service_name: str = "summary_bot", schema_dir: Optional[str] = None) -> ConfigSchema:
    """Load the configuration schema for ``service_name``."""
    schema_path = os.path.join(resolve_schema_dir(schema_dir), f"{service_name}.json")
    return ConfigSchema.from_json_file(schema_path)


def load_typed_config(
    service_name: str = "summary_bot",
    schema_dir: Optional[str] = None,
    provider: Optional[ConfigProvider] = None,
) -> TypedConfig:
    """Load and validate configuration, returning an immutable typed config.

    This is the only supported way to build configuration. Values are read
    from ``provider`` (the process environment by default) using each schema
    field's ``env_var``.

    Args:
        service_name: Name of the schema file (without ``.json``)
        schema_dir: Directory containing schema files; defaults to SCHEMA_DIR
            or the schemas packaged with this library
        provider: Optional provider overriding the environment (used in tests)

    Raises:
        ConfigSchemaError: If schema is missing or invalid
        ConfigValidationError: If configuration validation fails
    """
    schema = load_schema(service_name, schema_dir)
    loader = SchemaConfigLoader(schema=schema, provider=provider)
    return TypedConfig(
        loader.load(),
        schema_version=schema.schema_version,
        secret_fields=schema.secret_fields(),
        credential_fields={spec.name: spec.key for spec in schema.credential_fields()},
    )
