"""
Типизированные ошибки Late API и классификация неуспешных ответов
"""

import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Mapping, Optional

DEFAULT_RETRY_AFTER = 60

MISSING_API_KEY_MESSAGE = (
    "The LATE_API_KEY environment variable is missing or empty; either provide it, "
    "or instantiate the Late client with an api_key option, like Late(api_key='sk_...')."
)

STATUS_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    409: "conflict",
    422: "validation_error",
    429: "rate_limit_exceeded",
    500: "internal_server_error",
    502: "bad_gateway",
    503: "service_unavailable",
    504: "gateway_timeout",
}


def code_for_status(status_code: int) -> str:
    return STATUS_CODES.get(status_code, f"http_{status_code}")


class LateApiError(Exception):
    """Общая ошибка API"""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code or code_for_status(status_code)
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code}, code={self.code!r})"
        )


class MissingApiKeyError(LateApiError):
    """Не передан API ключ и не задана переменная окружения"""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message, 401, "missing_api_key")


class RateLimitError(LateApiError):
    """Превышен лимит запросов (429)"""

    def __init__(
        self,
        message: str,
        status_code: int = 429,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        reset_at: Optional[datetime] = None,
        retry_after: Optional[float] = None,
    ):
        super().__init__(message, status_code, code, details)
        self.reset_at = reset_at
        self.retry_after = retry_after

    @property
    def seconds_until_reset(self) -> int:
        """Сколько секунд ждать до сброса лимита (считается в момент обращения)"""
        if self.retry_after is not None:
            return max(0, math.ceil(self.retry_after))
        if self.reset_at is not None:
            delta = self.reset_at - datetime.now(timezone.utc)
            return max(0, math.ceil(delta.total_seconds()))
        return DEFAULT_RETRY_AFTER


class ValidationError(LateApiError):
    """Ошибка валидации запроса с разбивкой по полям"""

    def __init__(
        self,
        message: str,
        status_code: int = 422,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        fields: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code, code, details)
        self.fields = fields or {}


def _get_header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    if not headers:
        return None
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Epoch в секундах/миллисекундах или ISO-8601 строка"""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        try:
            value = float(value)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
    if isinstance(value, (int, float)):
        seconds = _parse_seconds(value)
        if seconds is None:
            return None
        # Миллисекунды отличаем по порядку величины
        if seconds > 1e12:
            seconds = seconds / 1000
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            # Вне диапазона datetime: подсказка игнорируется
            return None
    return None


def _parse_seconds(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        seconds = float(value)
    except (OverflowError, TypeError, ValueError):
        return None
    if not math.isfinite(seconds):
        return None
    return seconds


def _rate_limit_hint(body: Dict[str, Any], headers: Optional[Mapping[str, str]]):
    """Возвращает (reset_at, retry_after) из тела или заголовков ответа"""
    for key in ("retryAfter", "retry_after"):
        seconds = _parse_seconds(body.get(key))
        if seconds is not None:
            return None, seconds

    for key in ("resetAt", "reset_at", "reset"):
        reset_at = _parse_timestamp(body.get(key))
        if reset_at is not None:
            return reset_at, None

    retry_after = _get_header(headers, "Retry-After")
    if retry_after is not None:
        seconds = _parse_seconds(retry_after)
        if seconds is not None:
            return None, seconds
        try:
            reset_at = parsedate_to_datetime(retry_after)
        except (TypeError, ValueError):
            reset_at = None
        if reset_at is not None:
            if reset_at.tzinfo is None:
                reset_at = reset_at.replace(tzinfo=timezone.utc)
            return reset_at, None

    reset_at = _parse_timestamp(_get_header(headers, "X-RateLimit-Reset"))
    return reset_at, None


def _field_errors(body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    for source in (body, body.get("error")):
        if not isinstance(source, dict):
            continue
        for key in ("fields", "errors"):
            value = source.get(key)
            if isinstance(value, dict) and value:
                return value
    return None


def parse_api_error(
    status_code: int,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> LateApiError:
    """
    Классификация неуспешного ответа в типизированную ошибку.

    Args:
        status_code: HTTP статус ответа
        body: Разобранное JSON тело (любой формат, в т.ч. None)
        headers: Заголовки ответа

    Returns:
        RateLimitError для 429, ValidationError для 400/422 с ошибками полей,
        иначе LateApiError
    """
    if not isinstance(body, dict):
        body = {}

    error = body.get("error")
    nested = error if isinstance(error, dict) else {}

    message = None
    for candidate in (error, body.get("message"), nested.get("message")):
        if isinstance(candidate, str) and candidate:
            message = candidate
            break
    if message is None:
        message = f"Request failed with status {status_code}"

    code = body.get("code") or nested.get("code")
    if not isinstance(code, str):
        code = None

    details = body.get("details")
    if not isinstance(details, dict):
        details = None

    if status_code == 429:
        reset_at, retry_after = _rate_limit_hint(body, headers)
        return RateLimitError(
            message,
            status_code,
            code,
            details,
            reset_at=reset_at,
            retry_after=retry_after,
        )

    if status_code in (400, 422):
        fields = _field_errors(body)
        if fields is not None:
            return ValidationError(message, status_code, code, details, fields=fields)

    return LateApiError(message, status_code, code, details)
