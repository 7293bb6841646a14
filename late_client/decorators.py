"""
HTTP декораторы для namespace методов
"""

from functools import wraps
from typing import Any, Callable, Dict, Optional, TypeVar

from .utils import format_path, handle_request

DecoratedCallable = TypeVar("DecoratedCallable", bound=Callable[..., Any])


def http_method(method: str, path: str) -> Callable[[DecoratedCallable], DecoratedCallable]:
    """Базовый декоратор: превращает заглушку метода в вызов API"""
    # Имя path занято аргументом с path параметрами метода
    path_template = path

    def decorator(func: DecoratedCallable) -> DecoratedCallable:
        @wraps(func)
        async def wrapper(
            self,
            *,
            path: Optional[Dict[str, Any]] = None,
            query: Optional[Dict[str, Any]] = None,
            body: Any = None,
            headers: Optional[Dict[str, str]] = None,
        ) -> Any:
            return await handle_request(
                self.client,
                method,
                format_path(path_template, path),
                query=query,
                body=body,
                headers=headers,
            )

        # Сохраняем метаданные для отладки
        wrapper._http_method = method
        wrapper._http_path = path_template
        wrapper._original_func = func

        return wrapper

    return decorator


def get(path: str) -> Callable[[DecoratedCallable], DecoratedCallable]:
    return http_method("get", path)


def post(path: str) -> Callable[[DecoratedCallable], DecoratedCallable]:
    return http_method("post", path)


def put(path: str) -> Callable[[DecoratedCallable], DecoratedCallable]:
    return http_method("put", path)


def patch(path: str) -> Callable[[DecoratedCallable], DecoratedCallable]:
    return http_method("patch", path)


def delete(path: str) -> Callable[[DecoratedCallable], DecoratedCallable]:
    return http_method("delete", path)
