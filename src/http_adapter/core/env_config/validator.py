"""
Pydantic settings for environment configuration.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdapterSettings(BaseSettings):
    """
    HTTP Adapter configuration from environment variables.

    Reads from:
    1. Environment variables (HTTP_ADAPTER_*)
    2. .env file (if passed)
    3. Defaults

    Example .env file:
        HTTP_ADAPTER_TIMEOUT_MS=10000
        HTTP_ADAPTER_LOG_ENABLED=true
        HTTP_ADAPTER_LOG_LEVEL=DEBUG
        HTTP_ADAPTER_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix='HTTP_ADAPTER_',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    timeout_ms: int = Field(default=5000, gt=0, description="Per-call timeout in milliseconds")

    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="text")
