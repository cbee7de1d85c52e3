"""
Иерархия исключений HTTP Adapter.

Закрытый набор ошибок, которые видит вызывающий код:
- HttpStatusCodeError - ответ со статусом вне 2xx
- ParseError - тело ответа не удалось декодировать
- HttpTimeoutError - превышен таймаут
- HttpRequestError - сетевая ошибка (connection refused, reset)
- HttpGenericError - все остальное
"""

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Dict, Optional


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# REQUEST DESCRIPTION
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_NO_BODY = object()


@dataclass(frozen=True)
class RequestDescription:
    """
    Описание исходящего запроса для диагностики.

    Args:
        method: HTTP метод
        url: Итоговый URL (с query string)
        headers: Заголовки запроса
        body: Тело запроса (только для POST/PUT/PATCH)

    Examples:
        >>> RequestDescription("GET", "http://example.com", {})
        >>> RequestDescription("POST", "http://example.com", {}, body={"a": 1})
    """
    method: str
    url: str
    headers: Dict[str, Any] = field(default_factory=dict)
    body: Any = _NO_BODY

    @property
    def has_body(self) -> bool:
        return self.body is not _NO_BODY

    def as_dict(self) -> Dict[str, Any]:
        """Вернуть как dict; ключ body только если тело есть."""
        result = {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
        }
        if self.has_body:
            result["body"] = self.body
        return result


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HttpAdapterError(Exception):
    """Базовое исключение HTTP Adapter."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(HttpAdapterError):
    """Невалидные параметры конструктора адаптера."""
    pass


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CLASSIFIED ERRORS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HttpStatusCodeError(HttpAdapterError):
    """
    Сервер ответил статусом вне 2xx.

    Args:
        message: Сообщение транспорта
        status_code: HTTP статус
        body: Декодированное тело ответа
        headers: Заголовки ответа (без пустых значений)
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.body = body
        self.headers = headers if headers is not None else {}
        super().__init__(message)

    def get_status_code(self) -> int:
        return self.status_code

    def is_bad_request(self) -> bool:
        return self.status_code == HTTPStatus.BAD_REQUEST

    def is_unauthorized(self) -> bool:
        return self.status_code == HTTPStatus.UNAUTHORIZED

    def is_forbidden(self) -> bool:
        return self.status_code == HTTPStatus.FORBIDDEN

    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    def is_too_many_requests(self) -> bool:
        return self.status_code == HTTPStatus.TOO_MANY_REQUESTS

    def is_server_error(self) -> bool:
        return self.status_code == HTTPStatus.INTERNAL_SERVER_ERROR

    def is_bad_gateway(self) -> bool:
        return self.status_code == HTTPStatus.BAD_GATEWAY

    def is_service_unavailable(self) -> bool:
        return self.status_code == HTTPStatus.SERVICE_UNAVAILABLE

    def is_gateway_timeout(self) -> bool:
        return self.status_code == HTTPStatus.GATEWAY_TIMEOUT


class ParseError(HttpAdapterError):
    """
    Тело ответа не удалось декодировать в запрошенный формат.

    Args:
        message: Сообщение декодера (без URL)
        response_body: Исходное тело ответа
    """

    def __init__(self, message: str, response_body: str):
        self.response_body = response_body
        super().__init__(message)


class HttpTimeoutError(HttpAdapterError):
    """Запрос не уложился в таймаут."""

    @classmethod
    def for_timeout(cls, timeout_ms: int) -> "HttpTimeoutError":
        return cls(f"Timeout of {timeout_ms}ms exceeded")


class HttpRequestError(HttpAdapterError):
    """
    Сетевая ошибка транспорта.

    Примеры:
    - Connection refused
    - Connection reset

    Args:
        message: Сообщение транспорта
        request: Описание запроса, который не удалось выполнить
    """

    def __init__(self, message: str, request: RequestDescription):
        self.request = request
        super().__init__(message)


class HttpGenericError(HttpAdapterError):
    """
    Все, что не попало в другие категории.

    original_error хранится только для диагностики, ловить по его типу не нужно.
    """

    def __init__(self, message: str, original_error: BaseException):
        self.original_error = original_error
        super().__init__(message)
