"""Tests for HttpAdapterFactory."""

import pytest

from http_adapter import (
    AdapterConfig,
    AsyncHttpAdapter,
    ConfigurationError,
    HttpAdapter,
    HttpAdapterFactory,
    RequestsHttpAdapter,
)


class TestHttpAdapterFactory:

    def test_create_default(self):
        adapter = HttpAdapterFactory().create()

        assert isinstance(adapter, RequestsHttpAdapter)
        assert isinstance(adapter, HttpAdapter)
        assert adapter.timeout_ms == 5000
        adapter.close()

    def test_create_with_kwargs(self):
        adapter = HttpAdapterFactory().create(timeout_ms=60000)
        assert adapter.timeout_ms == 60000
        adapter.close()

    def test_factory_config_shared(self):
        config = AdapterConfig.create(timeout_ms=10000)
        factory = HttpAdapterFactory(config)

        first, second = factory.create(), factory.create()

        assert first is not second
        assert first.config is config and second.config is config
        first.close()
        second.close()

    def test_explicit_config_wins(self):
        factory = HttpAdapterFactory(AdapterConfig.create(timeout_ms=10000))
        adapter = factory.create(AdapterConfig.create(timeout_ms=20000))
        assert adapter.timeout_ms == 20000
        adapter.close()

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError):
            HttpAdapterFactory().create(timeout_ms=-1)

    @pytest.mark.asyncio
    async def test_create_async(self):
        adapter = HttpAdapterFactory(AdapterConfig.create(timeout_ms=1500)).create_async()

        assert isinstance(adapter, AsyncHttpAdapter)
        assert adapter.timeout_ms == 1500
        await adapter.close()
