# src/http_adapter/core/base.py
"""
Общий интерфейс адаптеров и логика, не зависящая от транспорта.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union

from .config import AdapterConfig, RequestOptions
from .error_classifier import ErrorClassifier
from .exceptions import HttpAdapterError, RequestDescription
from .logging import AdapterLogger
from .request_options import RequestOptionsBuilder
from .utils import sanitize_headers

OptionsLike = Union[RequestOptions, Mapping[str, Any], None]


class HttpAdapter(ABC):
    """
    Стабильный интерфейс поверх HTTP библиотеки.

    GET/DELETE принимают query параметры, POST/PUT/PATCH - тело.
    Результат - тело ответа или FullResponse (resolve_full_response=True).
    Любая ошибка транспорта превращается ровно в одну ошибку адаптера.
    """

    _logger_name = "http_adapter"

    def __init__(self, config: Optional[AdapterConfig] = None, **kwargs: Any):
        """
        Args:
            config: AdapterConfig instance
            **kwargs: Параметры AdapterConfig.create (timeout_ms, logging)
        """
        if config is None:
            config = AdapterConfig.create(**kwargs)

        self._config = config
        self._logger: Optional[AdapterLogger] = None
        if config.logging:
            self._logger = AdapterLogger(config=config.logging, name=self._logger_name)

    @property
    def config(self) -> AdapterConfig:
        return self._config

    @property
    def timeout_ms(self) -> int:
        return self._config.timeout_ms

    # ==================== HTTP методы ====================

    @abstractmethod
    def get(self, url: str, params: Optional[Mapping[str, Any]] = None,
            headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """GET запрос."""

    @abstractmethod
    def delete(self, url: str, params: Optional[Mapping[str, Any]] = None,
               headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """DELETE запрос."""

    @abstractmethod
    def post(self, url: str, body: Any = None,
             headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """POST запрос."""

    @abstractmethod
    def put(self, url: str, body: Any = None,
            headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """PUT запрос."""

    @abstractmethod
    def patch(self, url: str, body: Any = None,
              headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """PATCH запрос."""

    # ==================== Внутренние методы ====================

    @staticmethod
    def _describe_query_request(
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]],
        headers: Optional[Mapping[str, Any]],
        options: RequestOptions
    ) -> RequestDescription:
        """Запрос без тела: параметры уходят в URL."""
        return RequestDescription(
            method=method,
            url=RequestOptionsBuilder.build_url(url, params, options.array_format),
            headers=dict(headers) if headers else {},
        )

    @staticmethod
    def _describe_body_request(
        method: str,
        url: str,
        body: Any,
        headers: Optional[Mapping[str, Any]]
    ) -> RequestDescription:
        """Запрос с телом; без тела отправляется пустой объект."""
        return RequestDescription(
            method=method,
            url=url,
            headers=dict(headers) if headers else {},
            body={} if body is None else body,
        )

    def _transport_options(self, request: RequestDescription, options: RequestOptions) -> Dict[str, Any]:
        return RequestOptionsBuilder.build_transport_options(
            headers=request.headers,
            parse_json=options.parse_json,
            timeout_ms=self._config.timeout_ms,
        )

    @staticmethod
    def _body_kwargs(request: RequestDescription, options: RequestOptions) -> Dict[str, Any]:
        """json=... или data=... для requests/httpx."""
        if not request.has_body:
            return {}
        if RequestOptionsBuilder.select_body_encoding(options.content_type) == "form":
            return {"data": request.body}
        return {"json": request.body}

    def _finish(
        self,
        request: RequestDescription,
        options: RequestOptions,
        status_code: int,
        body: Any,
        headers: Any,
        start_time: float
    ):
        if self._logger:
            self._logger.info(
                "Request completed",
                method=request.method,
                url=request.url,
                status_code=status_code,
                duration_ms=round((time.time() - start_time) * 1000, 2),
            )

        return RequestOptionsBuilder.project_response(
            body,
            RequestOptionsBuilder.normalize_headers(headers),
            options.resolve_full_response,
        )

    def _log_started(self, request: RequestDescription) -> None:
        if self._logger:
            self._logger.debug(
                "Request started",
                method=request.method,
                url=request.url,
                headers=sanitize_headers(request.headers),
                timeout_ms=self._config.timeout_ms,
            )

    def _classify_failure(
        self,
        error: BaseException,
        request: RequestDescription,
        options: RequestOptions,
        start_time: float
    ) -> HttpAdapterError:
        """Классифицирует ошибку ровно один раз и логирует результат."""
        adapter_error = ErrorClassifier.classify(
            error,
            request,
            parse_json=options.parse_json,
            timeout_ms=self._config.timeout_ms,
        )

        if self._logger:
            self._logger.warning(
                "Request failed",
                method=request.method,
                url=request.url,
                error=adapter_error.message,
                error_type=type(adapter_error).__name__,
                transport_error_type=type(error).__name__,
                duration_ms=round((time.time() - start_time) * 1000, 2),
            )

        return adapter_error

    def _close_logger(self) -> None:
        if self._logger is not None:
            self._logger.close()
