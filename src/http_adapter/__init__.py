"""HTTP Adapter - stable interface over requests/httpx."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.base import HttpAdapter
from .core.http_adapter import RequestsHttpAdapter
from .async_adapter import AsyncHttpAdapter
from .factory import HttpAdapterFactory
from .core.config import (
    AdapterConfig,
    RequestOptions,
    ArrayFormat,
    ContentType,
    DEFAULTS,
)
from .core.request_options import RequestOptionsBuilder, FullResponse
from .core.error_classifier import ErrorClassifier
from .core.exceptions import (
    HttpAdapterError,
    ConfigurationError,
    HttpStatusCodeError,
    ParseError,
    HttpTimeoutError,
    HttpRequestError,
    HttpGenericError,
    RequestDescription,
)
from .core.logging import LoggingConfig
from .core.env_config import load_from_env

# Users can configure logging themselves using logging.getLogger('http_adapter')
logging.getLogger('http_adapter').addHandler(logging.NullHandler())

try:
    __version__ = version("http-adapter")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Adapters
    "HttpAdapter",
    "RequestsHttpAdapter",
    "AsyncHttpAdapter",
    "HttpAdapterFactory",

    # Config
    "AdapterConfig",
    "RequestOptions",
    "ArrayFormat",
    "ContentType",
    "DEFAULTS",
    "LoggingConfig",
    "load_from_env",

    # Options / results
    "RequestOptionsBuilder",
    "FullResponse",
    "ErrorClassifier",

    # Exceptions
    "HttpAdapterError",
    "ConfigurationError",
    "HttpStatusCodeError",
    "ParseError",
    "HttpTimeoutError",
    "HttpRequestError",
    "HttpGenericError",
    "RequestDescription",

    # Version
    "__version__",
]
