"""
Configuration loader from environment variables and .env files.
"""

from typing import Any, Optional

from pydantic import ValidationError

from ..config import AdapterConfig
from ..exceptions import ConfigurationError
from ..logging.config import LoggingConfig
from .validator import AdapterSettings


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> AdapterConfig:
    """
    Load AdapterConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (HTTP_ADAPTER_*)
    3. .env file
    4. Defaults

    Args:
        env_file: Optional .env file path
        **overrides: timeout_ms, log_enabled, log_level, log_format

    Returns:
        AdapterConfig instance

    Raises:
        ConfigurationError: invalid values in environment

    Example:
        >>> config = load_from_env(timeout_ms=60000)
    """
    try:
        settings = AdapterSettings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment configuration: {e}") from e

    logging_config = None
    if overrides.get('log_enabled', settings.log_enabled):
        logging_config = LoggingConfig.create(
            level=overrides.get('log_level', settings.log_level),
            format=overrides.get('log_format', settings.log_format),
        )

    return AdapterConfig.create(
        timeout_ms=overrides.get('timeout_ms', settings.timeout_ms),
        logging=logging_config,
    )
