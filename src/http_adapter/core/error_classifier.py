# src/http_adapter/core/error_classifier.py
"""
Классификация ошибок транспорта.

Любая ошибка requests/httpx (или декодирования тела) сначала сводится
к одному значению FailureKind, затем строится ровно одна ошибка адаптера.
Порядок проверок важен: часть ошибок транспорта наследуется друг от друга.
"""

import json
import re
from enum import Enum
from typing import Any, Optional

import httpx
import requests
from urllib3.exceptions import MaxRetryError, NewConnectionError
from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

from .exceptions import (
    HttpAdapterError,
    HttpGenericError,
    HttpRequestError,
    HttpStatusCodeError,
    HttpTimeoutError,
    ParseError,
    RequestDescription,
)
from .request_options import RequestOptionsBuilder


class FailureKind(str, Enum):
    """Закрытый набор категорий ошибок."""
    STATUS = "status"
    PARSE = "parse"
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    GENERIC = "generic"


_STATUS_ERROR_TYPES = (requests.exceptions.HTTPError, httpx.HTTPStatusError)

_TIMEOUT_ERROR_TYPES = (requests.exceptions.Timeout, httpx.TimeoutException)

# Сравниваются по точному типу: подклассы (SSLError, ProxyError,
# RemoteProtocolError, ...) уходят в GENERIC
_CONNECTION_ERROR_TYPES = (
    requests.exceptions.ConnectionError,
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
)

_URL_SUFFIX = re.compile(r"\sin\s+[\"']?https?://", re.IGNORECASE)


def strip_url_suffix(message: str) -> str:
    """
    Отрезает хвост "in <url>" из сообщения декодера.

    Examples:
        >>> strip_url_suffix("Unexpected token < at position 10 in http://example.com")
        'Unexpected token < at position 10'
        >>> strip_url_suffix('Unexpected end in "https://example.com/a"')
        'Unexpected end'
    """
    return _URL_SUFFIX.split(message, 1)[0]


def _wraps_timeout(error: BaseException) -> bool:
    """requests.ConnectionError поверх таймаута urllib3 (чтение тела)."""
    reason = error.args[0] if error.args else None
    if isinstance(reason, MaxRetryError):
        reason = reason.reason
    # NewConnectionError наследуется от ConnectTimeoutError, но это отказ соединения
    return isinstance(reason, Urllib3TimeoutError) and not isinstance(reason, NewConnectionError)


def _message(error: BaseException) -> str:
    return str(error) or type(error).__name__


class ErrorClassifier:
    """Класс для классификации ошибок транспорта"""

    @staticmethod
    def failure_kind(error: BaseException) -> FailureKind:
        """
        Определяет категорию ошибки. Срабатывает первое совпадение.

        Args:
            error: Исключение транспорта или json декодера

        Returns:
            FailureKind
        """
        if isinstance(error, _STATUS_ERROR_TYPES) and getattr(error, "response", None) is not None:
            return FailureKind.STATUS

        if isinstance(error, json.JSONDecodeError):
            return FailureKind.PARSE

        if isinstance(error, _TIMEOUT_ERROR_TYPES):
            return FailureKind.TIMEOUT

        if type(error) is requests.exceptions.ConnectionError and _wraps_timeout(error):
            return FailureKind.TIMEOUT

        if type(error) in _CONNECTION_ERROR_TYPES:
            return FailureKind.CONNECTION

        return FailureKind.GENERIC

    @staticmethod
    def classify(
        error: BaseException,
        request: RequestDescription,
        parse_json: bool = True,
        timeout_ms: Optional[int] = None
    ) -> HttpAdapterError:
        """
        Преобразует ошибку транспорта в ошибку адаптера.

        Args:
            error: Исходное исключение
            request: Описание запроса (для HttpRequestError)
            parse_json: Режим декодирования тела ответа с ошибкой
            timeout_ms: Настроенный таймаут (для сообщения HttpTimeoutError)

        Returns:
            Ровно одна ошибка адаптера

        Examples:
            >>> err = requests.exceptions.ConnectionError("Connection refused")
            >>> request = RequestDescription("GET", "http://example.com")
            >>> isinstance(ErrorClassifier.classify(err, request), HttpRequestError)
            True
        """
        kind = ErrorClassifier.failure_kind(error)

        if kind is FailureKind.STATUS:
            response = error.response
            return HttpStatusCodeError(
                message=_message(error),
                status_code=response.status_code,
                body=ErrorClassifier._error_body(response, parse_json),
                headers=RequestOptionsBuilder.strip_undefined_headers(
                    RequestOptionsBuilder.normalize_headers(response.headers)
                ),
            )

        if kind is FailureKind.PARSE:
            return ParseError(
                message=strip_url_suffix(str(error)),
                response_body=error.doc,
            )

        if kind is FailureKind.TIMEOUT:
            if timeout_ms is not None:
                return HttpTimeoutError.for_timeout(timeout_ms)
            return HttpTimeoutError(_message(error))

        if kind is FailureKind.CONNECTION:
            return HttpRequestError(message=_message(error), request=request)

        return HttpGenericError(message=_message(error), original_error=error)

    @staticmethod
    def _error_body(response: Any, parse_json: bool) -> Any:
        """Тело ответа с ошибкой; не-JSON тело остается текстом."""
        text = response.text
        try:
            return RequestOptionsBuilder.decode_body(text, parse_json)
        except ValueError:
            return text
