# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Schema-driven configuration loader with validation."""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .base import ConfigProvider
from .env_provider import EnvConfigProvider

DEFAULT_SCHEMA_DIR = os.path.join(os.path.dirname(__file__), "schemas")

_SUPPORTED_TYPES = ("string", "int", "float", "bool")


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


class ConfigSchemaError(Exception):
    """Exception raised when schema is invalid or missing."""
    pass


@dataclass
class FieldSpec:
    """Specification for a single configuration field.

    ``credential`` marks values the bot cannot operate without; they are not
    enforced at load time (see ``check_credentials``) so the process can still
    start for local development. ``secret`` marks values that must never be
    logged.
    """
    name: str
    field_type: str = "string"
    required: bool = False
    default: Any = None
    env_var: Optional[str] = None
    description: Optional[str] = None
    secret: bool = False
    credential: bool = False
    choices: Optional[list] = None

    @property
    def key(self) -> str:
        return self.env_var or self.name.upper()


@dataclass
class ConfigSchema:
    """Configuration schema for the bot."""
    service_name: str
    fields: Dict[str, FieldSpec] = field(default_factory=dict)
    schema_version: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigSchema":
        """Create ConfigSchema from dictionary.

        Raises:
            ConfigSchemaError: If a field declares an unsupported type
        """
        fields = {}
        for field_name, field_data in data.get("fields", {}).items():
            field_type = field_data.get("type", "string")
            if field_type not in _SUPPORTED_TYPES:
                raise ConfigSchemaError(
                    f"Field '{field_name}' has unsupported type '{field_type}'. "
                    f"Must be one of: {', '.join(_SUPPORTED_TYPES)}"
                )
            fields[field_name] = FieldSpec(
                name=field_name,
                field_type=field_type,
                required=field_data.get("required", False),
                default=field_data.get("default"),
                env_var=field_data.get("env_var"),
                description=field_data.get("description"),
                secret=field_data.get("secret", False),
                credential=field_data.get("credential", False),
                choices=field_data.get("choices"),
            )

        return cls(
            service_name=data.get("service_name", "unknown"),
            fields=fields,
            schema_version=data.get("schema_version"),
        )

    @classmethod
    def from_json_file(cls, filepath: str) -> "ConfigSchema":
        """Load schema from JSON file.

        Raises:
            ConfigSchemaError: If schema file is invalid or missing
        """
        if not os.path.exists(filepath):
            raise ConfigSchemaError(f"Schema file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigSchemaError(f"Invalid JSON in schema file {filepath}: {e}") from e
        return cls.from_dict(data)

    def secret_fields(self) -> set[str]:
        return {name for name, spec in self.fields.items() if spec.secret}

    def credential_fields(self) -> list[FieldSpec]:
        return [spec for spec in self.fields.values() if spec.credential]


class SchemaConfigLoader:
    """Loads and validates configuration based on schema."""

    def __init__(self, schema: ConfigSchema, provider: Optional[ConfigProvider] = None):
        """Initialize the schema config loader.

        Args:
            schema: Configuration schema
            provider: Source of raw values, keyed by each field's env var
                (defaults to the process environment)
        """
        self.schema = schema
        self.provider = provider or EnvConfigProvider()

    def load(self) -> Dict[str, Any]:
        """Load and validate configuration based on schema.

        Returns:
            Validated configuration dictionary

        Raises:
            ConfigValidationError: If required fields are missing or a value
                is outside its declared choices
        """
        config = {}
        errors = []

        for field_name, field_spec in self.schema.fields.items():
            value = self._load_field(field_spec)

            if field_spec.required and value is None:
                errors.append(f"{field_name}: required field is missing (env: {field_spec.key})")
                continue
            if field_spec.choices and value is not None and value not in field_spec.choices:
                errors.append(
                    f"{field_name}: '{value}' is not one of {', '.join(map(str, field_spec.choices))}"
                )
                continue

            config[field_name] = value

        if errors:
            raise ConfigValidationError(
                f"Configuration validation failed for {self.schema.service_name}:\n" +
                "\n".join(f"  - {err}" for err in errors)
            )

        return config

    def _load_field(self, field_spec: FieldSpec) -> Any:
        key = field_spec.key
        default = field_spec.default

        if field_spec.field_type == "bool":
            return self.provider.get_bool(key, default if default is not None else False)
        if field_spec.field_type == "int":
            return self.provider.get_int(key, default if default is not None else 0)
        if field_spec.field_type == "float":
            return self.provider.get_float(key, default if default is not None else 0.0)
        return self.provider.get(key, default)


def resolve_schema_dir(schema_dir: Optional[str] = None) -> str:
    """Pick the schema directory: explicit argument, SCHEMA_DIR, then the packaged schemas."""
    return schema_dir or os.environ.get("SCHEMA_DIR") or DEFAULT_SCHEMA_DIR
