# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Startup credential checks."""

from typing import TYPE_CHECKING

from summarybot_errors import ConfigurationError

from .typed_config import TypedConfig

if TYPE_CHECKING:
    from summarybot_logging import Logger


def check_credentials(config: TypedConfig) -> list[str]:
    """Return the environment variables of credentials that are unset.

    Args:
        config: Loaded configuration

    Returns:
        Sorted list of environment variable names (empty when all are present)
    """
    missing = [
        env_var
        for name, env_var in config.get_credential_fields().items()
        if not getattr(config, name, None)
    ]
    return sorted(missing)


def validate_startup(config: TypedConfig, logger: "Logger") -> list[str]:
    """Check credentials at process start.

    Missing credentials are fatal in production. Elsewhere they are logged
    and the process keeps running so health checks and the URL handshake
    still work; the Slack endpoint stays disabled.

    Returns:
        The missing environment variable names

    Raises:
        ConfigurationError: If credentials are missing in production
    """
    missing = check_credentials(config)
    if not missing:
        logger.info("All required credentials are configured")
        return missing

    if config.is_production():
        logger.error("Missing required credentials", missing=missing)
        raise ConfigurationError(missing)

    logger.warning(
        "Some credentials are missing; the Slack endpoint will be disabled. "
        "Set them in the environment or a .env file before deploying.",
        missing=missing,
        environment=config.environment,
    )
    return missing
