"""
Logging for HTTP Adapter.

Example:
    >>> from http_adapter.core.logging import LoggingConfig
    >>> from http_adapter import RequestsHttpAdapter
    >>>
    >>> adapter = RequestsHttpAdapter(logging=LoggingConfig.create(level="DEBUG", format="json"))
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import AdapterLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "AdapterLogger",
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
]
