"""
Tests for logging configuration.

Tests LoggingConfig, LogLevel, and LogFormat.
"""

import pytest

from http_adapter.core.logging.config import LoggingConfig, LogLevel, LogFormat


class TestLoggingConfig:
    """Tests for LoggingConfig dataclass."""

    def test_default_config(self):
        """Default LoggingConfig has expected values."""
        config = LoggingConfig()

        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.TEXT
        assert config.enable_console is True
        assert config.extra_fields == {}

    def test_create_with_strings(self):
        """create() accepts case-insensitive strings."""
        config = LoggingConfig.create(level="debug", format="JSON", extra_fields={"service": "billing"})

        assert config.level is LogLevel.DEBUG
        assert config.format is LogFormat.JSON
        assert config.extra_fields == {"service": "billing"}

    @pytest.mark.parametrize("kwargs", [{"level": "LOUD"}, {"format": "xml"}])
    def test_create_invalid(self, kwargs):
        with pytest.raises(ValueError):
            LoggingConfig.create(**kwargs)

    def test_enums_are_strings(self):
        assert isinstance(LogLevel.INFO, str)
        assert LogFormat.JSON == "json"
