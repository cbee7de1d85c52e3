"""Core HTTP Adapter модули."""

from .config import AdapterConfig, RequestOptions, ArrayFormat, ContentType, DEFAULTS
from .exceptions import (
    HttpAdapterError,
    ConfigurationError,
    HttpStatusCodeError,
    ParseError,
    HttpTimeoutError,
    HttpRequestError,
    HttpGenericError,
    RequestDescription,
)
from .request_options import RequestOptionsBuilder, FullResponse
from .error_classifier import ErrorClassifier, FailureKind, strip_url_suffix
from .base import HttpAdapter
from .http_adapter import RequestsHttpAdapter

__all__ = [
    # Config
    "AdapterConfig",
    "RequestOptions",
    "ArrayFormat",
    "ContentType",
    "DEFAULTS",
    # Options
    "RequestOptionsBuilder",
    "FullResponse",
    # Errors
    "ErrorClassifier",
    "FailureKind",
    "strip_url_suffix",
    "HttpAdapterError",
    "ConfigurationError",
    "HttpStatusCodeError",
    "ParseError",
    "HttpTimeoutError",
    "HttpRequestError",
    "HttpGenericError",
    "RequestDescription",
    # Adapters
    "HttpAdapter",
    "RequestsHttpAdapter",
]
