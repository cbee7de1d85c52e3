"""Factory for HTTP adapters."""

from typing import Any, Optional

from .async_adapter import AsyncHttpAdapter
from .core.config import AdapterConfig
from .core.http_adapter import RequestsHttpAdapter


class HttpAdapterFactory:
    """
    Создает адаптеры с общей конфигурацией.

    Example:
        >>> factory = HttpAdapterFactory(AdapterConfig.create(timeout_ms=10000))
        >>> adapter = factory.create()
        >>> async_adapter = factory.create_async()
    """

    def __init__(self, config: Optional[AdapterConfig] = None):
        self._config = config

    def _resolve(self, config: Optional[AdapterConfig], kwargs: Any) -> AdapterConfig:
        if config is not None:
            return config
        if kwargs:
            return AdapterConfig.create(**kwargs)
        return self._config or AdapterConfig()

    def create(self, config: Optional[AdapterConfig] = None, **kwargs: Any) -> RequestsHttpAdapter:
        """Синхронный адаптер (requests)."""
        return RequestsHttpAdapter(self._resolve(config, kwargs))

    def create_async(self, config: Optional[AdapterConfig] = None, **kwargs: Any) -> AsyncHttpAdapter:
        """Асинхронный адаптер (httpx)."""
        return AsyncHttpAdapter(self._resolve(config, kwargs))
