"""
Базовый фасад клиента: ключ, базовый URL и перехватчики для всех вызовов
"""

import logging
from typing import Dict, Optional

from .common import AiohttpClient, AiohttpResponse, PreparedRequest
from .config import ClientOptions
from .errors import parse_api_error

logger = logging.getLogger(__name__)


class BaseClient(AiohttpClient):
    """
    Фасад Late API без namespace-ов.

    Сгенерированный класс Late наследуется от него и добавляет по атрибуту
    на каждый namespace. Каждый экземпляр владеет своим транспортом, поэтому
    клиенты с разными ключами и URL не влияют друг на друга.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        default_headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__()
        self.options = ClientOptions.resolve(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            default_headers=default_headers,
        )
        self.initialize(
            self.options.base_url,
            timeout=self.options.timeout,
            retries=self.options.max_retries,
        )
        self.interceptors.use_request(self._authorize)
        self.interceptors.use_response(self._raise_for_status)

    @property
    def api_key(self) -> str:
        return self.options.api_key

    @property
    def base_url(self) -> str:
        return self.options.base_url

    def _authorize(self, request: PreparedRequest) -> PreparedRequest:
        """Bearer авторизация и заголовки по умолчанию"""
        request.headers["Authorization"] = f"Bearer {self.options.api_key}"
        request.headers.update(self.options.default_headers)
        return request

    async def _raise_for_status(self, response: AiohttpResponse) -> AiohttpResponse:
        """Успешный ответ пропускается как есть, неуспешный превращается в ошибку"""
        if response.ok:
            return response

        try:
            body = await response.json()
        except ValueError:
            body = None

        error = parse_api_error(response.status_code, body, response.headers)
        logger.debug(f"API error {error.status_code} ({error.code}): {error.message}")
        raise error

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"
