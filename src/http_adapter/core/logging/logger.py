"""
Logger used by the adapters when AdapterConfig.logging is set.
"""

import logging
import sys
from typing import Any, Optional

from .config import LoggingConfig
from .formatters import get_formatter
from ..utils import mask_sensitive_data


class _ExtraFieldsFilter(logging.Filter):
    """Adds static fields (service, environment, ...) to every record."""

    def __init__(self, extra_fields):
        super().__init__()
        self.extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class _OwnerFilter(logging.Filter):
    """Passes only records logged through the owning AdapterLogger."""

    def __init__(self, owner):
        super().__init__()
        self.owner = owner

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "_owner", None) is self.owner


class AdapterLogger:
    """
    Thin wrapper around a named stdlib logger.

    Extra fields are passed as keyword arguments and masked before they
    reach any handler.

    Example:
        >>> logger = AdapterLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request completed", method="GET", status_code=200)
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "http_adapter"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        level = getattr(logging, self.config.level.value)

        self._logger = logging.getLogger(name)
        self._logger.setLevel(min(self._logger.level or level, level))
        self._logger.propagate = False

        # Logger shared between adapters of one kind; each instance owns only its handler
        self._handler: Optional[logging.Handler] = None
        if self.config.enable_console:
            self._handler = logging.StreamHandler(sys.stdout)
            self._handler.setLevel(level)
            self._handler.setFormatter(get_formatter(self.config.format.value))
            self._handler.addFilter(_OwnerFilter(self))
            if self.config.extra_fields:
                self._handler.addFilter(_ExtraFieldsFilter(self.config.extra_fields))
            self._logger.addHandler(self._handler)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        extra = mask_sensitive_data(kwargs)
        extra["_owner"] = self
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def close(self) -> None:
        """Flush and detach this instance's handler. Idempotent."""
        if self._closed:
            return

        if self._handler is not None:
            self._handler.flush()
            self._handler.close()
            self._logger.removeHandler(self._handler)
            self._handler = None

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
