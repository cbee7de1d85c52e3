"""
Система конфигурации для HTTP Adapter.

Все конфиги immutable (frozen dataclasses): конфиг адаптера задается
один раз при создании, опции запроса создаются заново на каждый вызов.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Union, TYPE_CHECKING

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ENUMS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ArrayFormat(str, Enum):
    """Способ сериализации массивов в query string."""
    BRACKETS = "brackets"
    INDICES = "indices"
    REPEAT = "repeat"
    COMMA = "comma"


class ContentType(str, Enum):
    """Кодировка тела запроса."""
    JSON = "json"
    FORM = "form"


def _flag(name: str, value: Optional[bool], default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"Invalid request option: {name} must be a bool, got {value!r}")
    return value


class DEFAULTS:
    TIMEOUT_MS = 5000
    PARSE_JSON = True
    RESOLVE_FULL_RESPONSE = False
    CONTENT_TYPE = ContentType.JSON
    ARRAY_FORMAT = ArrayFormat.BRACKETS

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# REQUEST OPTIONS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class RequestOptions:
    """
    Опции одного вызова.

    Args:
        array_format: Сериализация массивов в query (GET/DELETE)
        parse_json: Декодировать тело как JSON (иначе текст)
        resolve_full_response: Вернуть FullResponse вместо тела
        content_type: Кодировка тела (POST/PUT/PATCH)

    Examples:
        >>> RequestOptions()
        >>> RequestOptions.create(array_format="comma", parse_json=False)
    """
    array_format: ArrayFormat = DEFAULTS.ARRAY_FORMAT
    parse_json: bool = DEFAULTS.PARSE_JSON
    resolve_full_response: bool = DEFAULTS.RESOLVE_FULL_RESPONSE
    content_type: ContentType = DEFAULTS.CONTENT_TYPE

    @classmethod
    def create(
        cls,
        array_format: Union[str, ArrayFormat, None] = None,
        parse_json: Optional[bool] = None,
        resolve_full_response: Optional[bool] = None,
        content_type: Union[str, ContentType, None] = None,
    ) -> "RequestOptions":
        """
        Create RequestOptions; None означает значение по умолчанию.

        Raises:
            ConfigurationError: неизвестный array_format или content_type,
                не-bool значение parse_json или resolve_full_response
        """
        parse_json = _flag("parse_json", parse_json, DEFAULTS.PARSE_JSON)
        resolve_full_response = _flag(
            "resolve_full_response", resolve_full_response, DEFAULTS.RESOLVE_FULL_RESPONSE
        )
        try:
            return cls(
                array_format=ArrayFormat(array_format) if array_format is not None else DEFAULTS.ARRAY_FORMAT,
                parse_json=parse_json,
                resolve_full_response=resolve_full_response,
                content_type=ContentType(content_type) if content_type is not None else DEFAULTS.CONTENT_TYPE,
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid request option: {e}") from e

    @classmethod
    def coerce(cls, options: Union["RequestOptions", Mapping[str, Any], None]) -> "RequestOptions":
        """
        Принять RequestOptions, dict или None.

        Raises:
            ConfigurationError: неизвестный ключ или невалидное значение
        """
        if options is None:
            return cls()
        if isinstance(options, RequestOptions):
            return options
        unknown = set(options) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(f"Unknown request option(s): {', '.join(sorted(unknown))}")
        return cls.create(**dict(options))

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ADAPTER CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class AdapterConfig:
    """
    Главная конфигурация адаптера.

    Args:
        timeout_ms: Таймаут каждого вызова (мс), передается транспорту как есть
        logging: Конфигурация логирования (None = без логов)

    Examples:
        >>> AdapterConfig()
        >>> AdapterConfig.create(timeout_ms=60000)
    """
    timeout_ms: int = DEFAULTS.TIMEOUT_MS
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Валидация."""
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, (int, float)):
            raise ConfigurationError("timeout_ms must be a number")
        if self.timeout_ms <= 0:
            raise ConfigurationError("timeout_ms must be positive")

    @classmethod
    def create(
        cls,
        timeout_ms: Optional[int] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> "AdapterConfig":
        """
        Create AdapterConfig; timeout_ms=None дает 5000 мс.

        Example:
            >>> AdapterConfig.create(timeout_ms=60000).timeout_ms
            60000
        """
        return cls(
            timeout_ms=DEFAULTS.TIMEOUT_MS if timeout_ms is None else timeout_ms,
            logging=logging,
        )

    @property
    def timeout_seconds(self) -> float:
        """Таймаут в секундах для requests/httpx."""
        return self.timeout_ms / 1000
