"""
Environment configuration for HTTP Adapter.

Example:
    >>> from http_adapter.core.env_config import load_from_env
    >>> config = load_from_env(env_file=".env")
"""

from .loader import load_from_env
from .validator import AdapterSettings

__all__ = [
    "load_from_env",
    "AdapterSettings",
]
