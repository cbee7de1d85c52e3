# src/http_adapter/core/http_adapter.py
from typing import Any, Mapping, Optional
import time

import requests
from requests.adapters import HTTPAdapter as RequestsTransportAdapter

from .base import HttpAdapter, OptionsLike
from .config import AdapterConfig, RequestOptions
from .exceptions import RequestDescription
from .request_options import RequestOptionsBuilder
from .session_manager import ThreadSafeSessionManager


def raise_for_status(response: requests.Response) -> None:
    """
    Как Response.raise_for_status, но для любого статуса вне 2xx.

    Raises:
        requests.exceptions.HTTPError: "Response code 404 (Not Found)"
    """
    if not 200 <= response.status_code < 300:
        raise requests.exceptions.HTTPError(
            f"Response code {response.status_code} ({response.reason})",
            response=response,
        )


class RequestsHttpAdapter(HttpAdapter):
    """
    Адаптер поверх requests.

    Features:
        - Thread-safe: каждый поток получает собственную сессию
        - Ретраи транспорта выключены (max_retries=0)
        - Один и тот же таймаут для всех вызовов экземпляра

    Example:
        >>> with RequestsHttpAdapter(timeout_ms=10000) as adapter:
        ...     users = adapter.get("https://api.example.com/users", {"ids": [1, 2]})
    """

    _logger_name = "http_adapter.requests"

    def __init__(self, config: Optional[AdapterConfig] = None, **kwargs: Any):
        super().__init__(config, **kwargs)
        self._session_manager = ThreadSafeSessionManager(session_factory=self._create_session)

    def _create_session(self) -> requests.Session:
        """Create configured session."""
        session = requests.Session()

        transport = RequestsTransportAdapter(max_retries=0)
        session.mount('http://', transport)
        session.mount('https://', transport)

        return session

    @property
    def session(self) -> requests.Session:
        """Сессия текущего потока."""
        return self._session_manager.get_session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Закрывает сессии всех потоков и логгер."""
        self._close_logger()
        self._session_manager.close_all()

    # ==================== HTTP методы ====================

    def get(self, url: str, params: Optional[Mapping[str, Any]] = None,
            headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """
        Выполняет GET запрос.

        Args:
            url: Полный URL (может уже содержать query string)
            params: Query параметры
            headers: Заголовки
            options: RequestOptions или dict (array_format, parse_json, resolve_full_response)

        Returns:
            Тело ответа или FullResponse

        Raises:
            HttpStatusCodeError, ParseError, HttpTimeoutError,
            HttpRequestError, HttpGenericError
        """
        opts = RequestOptions.coerce(options)
        return self._send(self._describe_query_request("GET", url, params, headers, opts), opts)

    def delete(self, url: str, params: Optional[Mapping[str, Any]] = None,
               headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """Выполняет DELETE запрос (параметры как у get)."""
        opts = RequestOptions.coerce(options)
        return self._send(self._describe_query_request("DELETE", url, params, headers, opts), opts)

    def post(self, url: str, body: Any = None,
             headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """
        Выполняет POST запрос.

        Args:
            url: Полный URL
            body: Тело (по умолчанию {}), JSON или form по options.content_type
            headers: Заголовки
            options: RequestOptions или dict (content_type, parse_json, resolve_full_response)
        """
        opts = RequestOptions.coerce(options)
        return self._send(self._describe_body_request("POST", url, body, headers), opts)

    def put(self, url: str, body: Any = None,
            headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """Выполняет PUT запрос (параметры как у post)."""
        opts = RequestOptions.coerce(options)
        return self._send(self._describe_body_request("PUT", url, body, headers), opts)

    def patch(self, url: str, body: Any = None,
              headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """Выполняет PATCH запрос (параметры как у post)."""
        opts = RequestOptions.coerce(options)
        return self._send(self._describe_body_request("PATCH", url, body, headers), opts)

    def _send(self, request: RequestDescription, options: RequestOptions):
        transport_options = self._transport_options(request, options)
        self._log_started(request)
        start_time = time.time()

        try:
            response = self.session.request(
                method=request.method,
                url=request.url,
                headers=transport_options["headers"],
                timeout=transport_options["timeout_ms"] / 1000,
                **self._body_kwargs(request, options)
            )
            raise_for_status(response)
            body = RequestOptionsBuilder.decode_body(
                response.text,
                parse_json=transport_options["response_type"] == "json",
            )
        except Exception as e:
            raise self._classify_failure(e, request, options, start_time) from e

        return self._finish(request, options, response.status_code, body, response.headers, start_time)
