# src/http_adapter/async_adapter.py
"""
Асинхронный адаптер на базе httpx.

Те же опции, результаты и ошибки, что и у RequestsHttpAdapter,
но с async/await API для asyncio приложений.
"""

import time
from typing import Any, Mapping, Optional

import httpx

from .core.base import HttpAdapter, OptionsLike
from .core.config import AdapterConfig, RequestOptions
from .core.exceptions import RequestDescription
from .core.request_options import RequestOptionsBuilder


def raise_for_status(response: httpx.Response) -> None:
    """
    Raises:
        httpx.HTTPStatusError: для любого статуса вне 2xx
    """
    if not 200 <= response.status_code < 300:
        raise httpx.HTTPStatusError(
            f"Response code {response.status_code} ({response.reason_phrase})",
            request=response.request,
            response=response,
        )


class AsyncHttpAdapter(HttpAdapter):
    """
    Асинхронный адаптер поверх httpx.AsyncClient.

    Example:
        >>> async with AsyncHttpAdapter(timeout_ms=10000) as adapter:
        ...     users = await adapter.get("https://api.example.com/users")

        >>> # Или без context manager
        >>> adapter = AsyncHttpAdapter()
        >>> body = await adapter.post("https://api.example.com/users", {"name": "Ann"})
        >>> await adapter.close()
    """

    _logger_name = "http_adapter.httpx"

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs: Any
    ):
        """
        Args:
            config: AdapterConfig instance
            transport: Транспорт httpx (по умолчанию AsyncHTTPTransport без ретраев)
            **kwargs: Параметры AdapterConfig.create (timeout_ms, logging)
        """
        super().__init__(config, **kwargs)
        self._transport = transport
        # Клиент создаётся лениво или при входе в context manager
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport or httpx.AsyncHTTPTransport(retries=0),
                timeout=httpx.Timeout(self._config.timeout_seconds),
                follow_redirects=True,
            )
        return self._client

    async def __aenter__(self) -> "AsyncHttpAdapter":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Закрыть клиент и логгер."""
        self._close_logger()
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ==================== HTTP методы ====================

    async def get(self, url: str, params: Optional[Mapping[str, Any]] = None,
                  headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """GET запрос."""
        opts = RequestOptions.coerce(options)
        return await self._send(self._describe_query_request("GET", url, params, headers, opts), opts)

    async def delete(self, url: str, params: Optional[Mapping[str, Any]] = None,
                     headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """DELETE запрос."""
        opts = RequestOptions.coerce(options)
        return await self._send(self._describe_query_request("DELETE", url, params, headers, opts), opts)

    async def post(self, url: str, body: Any = None,
                   headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """POST запрос."""
        opts = RequestOptions.coerce(options)
        return await self._send(self._describe_body_request("POST", url, body, headers), opts)

    async def put(self, url: str, body: Any = None,
                  headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """PUT запрос."""
        opts = RequestOptions.coerce(options)
        return await self._send(self._describe_body_request("PUT", url, body, headers), opts)

    async def patch(self, url: str, body: Any = None,
                    headers: Optional[Mapping[str, Any]] = None, options: OptionsLike = None):
        """PATCH запрос."""
        opts = RequestOptions.coerce(options)
        return await self._send(self._describe_body_request("PATCH", url, body, headers), opts)

    async def _send(self, request: RequestDescription, options: RequestOptions):
        transport_options = self._transport_options(request, options)
        client = self._get_client()
        self._log_started(request)
        start_time = time.time()

        try:
            response = await client.request(
                request.method,
                request.url,
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
