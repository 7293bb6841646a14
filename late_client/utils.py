"""
Вспомогательные утилиты для namespace методов
"""

import base64
import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

_PATH_PARAM = re.compile(r"\{([^{}]+)\}")


def serialize_value(value: Any) -> Any:
    """Рекурсивная сериализация значений для JSON"""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    elif hasattr(value, "model_dump"):
        # Pydantic модель - сериализуем по алиасам, без пустых полей
        return serialize_value(value.model_dump(by_alias=True, exclude_none=True))
    else:
        return value


def serialize_query_value(value: Any) -> str:
    """Специальная сериализация для query параметров"""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, bool):
        # Boolean значения для query параметров должны быть строками
        return str(value).lower()
    elif isinstance(value, bytes):
        return base64.b64encode(value).decode("utf-8")
    return str(value)


def prepare_params(query: Optional[Dict[str, Any]]) -> Optional[List[Tuple[str, str]]]:
    """Подготовка query параметров, списки превращаются в повторяющиеся ключи"""
    if not query:
        return None

    params = []
    for name, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((name, serialize_query_value(item)) for item in value)
        else:
            params.append((name, serialize_query_value(value)))

    return params or None


def format_path(template: str, path_params: Optional[Dict[str, Any]]) -> str:
    """Подстановка path параметров в шаблон пути"""
    path_params = path_params or {}

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if path_params.get(name) is None:
            raise ValueError(f"Missing path parameter '{name}' for {template}")
        return quote(str(path_params[name]), safe="")

    return _PATH_PARAM.sub(replace, template)


async def parse_response(response) -> Any:
    """Чтение тела успешного ответа по content-type"""
    content = await response.read()
    if not content:
        return None

    content_type = response.headers.get("content-type", "").lower()
    if "json" in content_type:
        return await response.json()
    elif content_type.startswith("text/") or "xml" in content_type:
        return await response.text()
    return content


async def handle_request(
    client,
    method: str,
    path: str,
    query: Optional[Dict[str, Any]] = None,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """Выполнение запроса через транспорт клиента и разбор успешного ответа"""
    response = await client._send_request(
        method=method,
        path=path,
        params=prepare_params(query),
        data=serialize_value(body),
        headers=headers,
    )
    return await parse_response(response)
