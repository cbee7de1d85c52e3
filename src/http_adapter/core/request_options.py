# src/http_adapter/core/request_options.py
"""
Подготовка опций запроса для транспорта.

Query string, опции транспорта, выбор кодировки тела и проекция ответа.
Все функции чистые: без I/O и без исключений на "кривых" параметрах.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from .config import DEFAULTS, ArrayFormat, ContentType


@dataclass(frozen=True)
class FullResponse:
    """Тело и заголовки ответа (resolve_full_response=True)."""
    body: Any
    headers: Dict[str, Union[str, List[str]]] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {"body": self.body, "headers": dict(self.headers)}


def _stringify(value: Any) -> str:
    """Best-effort приведение скаляра к строке."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _iter_pairs(prefix: str, value: Any, array_format: ArrayFormat) -> Iterator[Tuple[str, str]]:
    """Развернуть значение в плоские пары (key, value)."""
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _iter_pairs(f"{prefix}[{key}]", item, array_format)

    elif _is_sequence(value):
        if array_format is ArrayFormat.COMMA:
            if value:
                yield prefix, ",".join(_stringify(item) for item in value)
            return

        for index, item in enumerate(value):
            if array_format is ArrayFormat.BRACKETS:
                key = f"{prefix}[]"
            elif array_format is ArrayFormat.INDICES:
                key = f"{prefix}[{index}]"
            else:
                key = prefix
            yield from _iter_pairs(key, item, array_format)

    else:
        yield prefix, _stringify(value)


def _encode(text: str) -> str:
    # RFC 3986: literal only for unreserved characters
    return quote(text, safe="")


class RequestOptionsBuilder:
    """Класс для подготовки опций запроса"""

    @staticmethod
    def build_query_string(
        params: Optional[Mapping[str, Any]],
        array_format: Union[str, ArrayFormat] = DEFAULTS.ARRAY_FORMAT,
        encode: bool = True
    ) -> str:
        """
        Сериализует параметры в query string.

        Args:
            params: Параметры (скаляры, списки, вложенные dict)
            array_format: brackets / indices / repeat / comma
            encode: Percent-encoding ключей и значений

        Returns:
            Query string без ведущего '?'

        Examples:
            >>> RequestOptionsBuilder.build_query_string({"a": [1, 2]}, "repeat")
            'a=1&a=2'
            >>> RequestOptionsBuilder.build_query_string({"a": [1, 2]}, "comma", encode=False)
            'a=1,2'
            >>> RequestOptionsBuilder.build_query_string({"a": [1, 2]})
            'a%5B%5D=1&a%5B%5D=2'
        """
        if not params:
            return ""

        array_format = ArrayFormat(array_format)
        parts = []
        for name, value in params.items():
            for key, item in _iter_pairs(str(name), value, array_format):
                if encode:
                    key, item = _encode(key), _encode(item)
                parts.append(f"{key}={item}")

        return "&".join(parts)

    @staticmethod
    def append_query(url: str, query: str) -> str:
        """
        Добавляет query string к URL без дублирования разделителя.

        Examples:
            >>> RequestOptionsBuilder.append_query("http://example.com", "a=1")
            'http://example.com?a=1'
            >>> RequestOptionsBuilder.append_query("http://example.com?b=2", "a=1")
            'http://example.com?b=2&a=1'
        """
        if not query:
            return url

        if url.endswith(("?", "&")):
            return url + query

        delimiter = "&" if "?" in url else "?"
        return url + delimiter + query

    @staticmethod
    def build_url(
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        array_format: Union[str, ArrayFormat] = DEFAULTS.ARRAY_FORMAT
    ) -> str:
        """URL с параметрами; без params возвращается как есть."""
        if not params:
            return url

        query = RequestOptionsBuilder.build_query_string(params, array_format)
        return RequestOptionsBuilder.append_query(url, query)

    @staticmethod
    def build_transport_options(
        headers: Optional[Mapping[str, Any]] = None,
        parse_json: bool = DEFAULTS.PARSE_JSON,
        timeout_ms: int = DEFAULTS.TIMEOUT_MS
    ) -> Dict[str, Any]:
        """
        Опции, которые передаются транспорту.

        Ретраи транспорта всегда выключены, заголовки и тело всегда
        запрашиваются вместе.
        """
        return {
            "headers": dict(headers) if headers else {},
            "response_type": "json" if parse_json else "text",
            "timeout_ms": timeout_ms,
            "resolve_body_only": False,
            "retry": 0,
        }

    @staticmethod
    def select_body_encoding(content_type: Union[str, ContentType, None] = None) -> str:
        """'form' для form-urlencoded, иначе 'json'."""
        if content_type is not None and ContentType(content_type) is ContentType.FORM:
            return "form"
        return "json"

    @staticmethod
    def normalize_headers(headers: Any) -> Dict[str, Any]:
        """
        Заголовки транспорта -> dict.

        У httpx повторяющиеся заголовки (set-cookie) собираются в список,
        заголовки requests уже склеены urllib3.
        """
        if headers is None:
            return {}

        multi_items = getattr(headers, "multi_items", None)
        if multi_items is None:
            return dict(headers)

        result: Dict[str, Any] = {}
        for key, value in multi_items():
            if key not in result:
                result[key] = value
            elif isinstance(result[key], list):
                result[key].append(value)
            else:
                result[key] = [result[key], value]
        return result

    @staticmethod
    def strip_undefined_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Убирает заголовки без значения."""
        if not headers:
            return {}
        return {key: value for key, value in headers.items() if value is not None}

    @staticmethod
    def decode_body(text: str, parse_json: bool = DEFAULTS.PARSE_JSON) -> Any:
        """
        Декодирует тело ответа.

        Пустое тело дает "" и в JSON режиме.

        Raises:
            json.JSONDecodeError: тело не является JSON
        """
        if not parse_json or not text:
            return text
        return json.loads(text)

    @staticmethod
    def project_response(
        body: Any,
        headers: Optional[Mapping[str, Any]] = None,
        resolve_full_response: bool = DEFAULTS.RESOLVE_FULL_RESPONSE
    ) -> Union[Any, FullResponse]:
        """Тело или FullResponse(body, headers)."""
        if resolve_full_response:
            return FullResponse(
                body=body,
                headers=RequestOptionsBuilder.strip_undefined_headers(headers),
            )
        return body


build_query_string = RequestOptionsBuilder.build_query_string
append_query = RequestOptionsBuilder.append_query
build_transport_options = RequestOptionsBuilder.build_transport_options
select_body_encoding = RequestOptionsBuilder.select_body_encoding
project_response = RequestOptionsBuilder.project_response
