"""
Utility functions for HTTP adapter logging.

Includes:
- URL sanitization (query values of sensitive params are masked)
- Header and log-field masking
"""

from typing import Any, Mapping, Optional, Set
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


DEFAULT_MASK = "REDACTED"

# Имена параметров/заголовков/полей, значения которых нельзя писать в лог
SENSITIVE_KEYS = {
    'api_key',
    'apikey',
    'api-key',
    'x-api-key',
    'token',
    'access_token',
    'refresh_token',
    'x-auth-token',
    'secret',
    'client_secret',
    'password',
    'passwd',
    'authorization',
    'proxy-authorization',
    'cookie',
    'set-cookie',
    'session',
    'session_id',
}


def _is_sensitive(name: Any, extra: Optional[Set[str]] = None) -> bool:
    lowered = str(name).lower()
    return lowered in SENSITIVE_KEYS or (extra is not None and lowered in extra)


def sanitize_url(
    url: str,
    extra_params: Optional[Set[str]] = None,
    mask: str = DEFAULT_MASK
) -> str:
    """
    Mask sensitive query parameters in URL for safe logging.

    Args:
        url: The URL to sanitize
        extra_params: Additional parameter names to mask (case-insensitive)
        mask: Replacement value

    Returns:
        Sanitized URL, structure preserved

    Examples:
        >>> sanitize_url('https://api.example.com/data?api_key=secret123')
        'https://api.example.com/data?api_key=REDACTED'
    """
    if not url:
        return url

    extra = {p.lower() for p in extra_params} if extra_params else None
    parsed = urlsplit(url)
    if not parsed.query:
        return url

    pairs = parse_qsl(parsed.query, keep_blank_values=True)
    if not any(_is_sensitive(name, extra) for name, _ in pairs):
        return url

    masked = [(name, mask if _is_sensitive(name, extra) else value) for name, value in pairs]
    return urlunsplit(parsed._replace(query=urlencode(masked)))


def sanitize_headers(headers: Optional[Mapping[str, Any]], mask: str = DEFAULT_MASK) -> Optional[dict]:
    """
    Mask sensitive headers for safe logging.

    Examples:
        >>> sanitize_headers({'Authorization': 'Bearer token123'})
        {'Authorization': 'REDACTED'}
    """
    if not headers:
        return headers

    return {key: mask if _is_sensitive(key) else value for key, value in headers.items()}


def mask_sensitive_data(data: Any, mask: str = DEFAULT_MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные поля в dict/list.

    Строки с URL проходят через sanitize_url.
    """
    if isinstance(data, Mapping):
        return {
            key: mask if _is_sensitive(key) else mask_sensitive_data(value, mask)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)
    if isinstance(data, str) and "?" in data and data.startswith(("http://", "https://")):
        return sanitize_url(data, mask=mask)
    return data
