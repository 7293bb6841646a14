import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

import aiohttp
from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector

logger = logging.getLogger(__name__)

# Только эти методы повторяются после сбоя транспорта
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})


class SendRequestError(Exception):
    """Сбой транспорта: соединение, таймаут, закрытая сессия"""

    def __init__(self, message, path, status_code, response_data=None):
        self.message = message
        self.path = path
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(f"[{status_code}] {path}: {message}")


@dataclass
class PreparedRequest:
    """Запрос, собираемый заново для каждой попытки"""

    method: str
    url: str
    params: Any = None
    data: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


class AiohttpResponse:
    """Ответ с заранее прочитанным телом, которое можно читать повторно"""

    def __init__(
        self,
        status_code: int,
        headers: Optional[Mapping[str, str]] = None,
        content: bytes = b"",
    ):
        self.status_code = status_code
        self.headers = {key.lower(): value for key, value in (headers or {}).items()}
        self._content = content

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    async def read(self) -> bytes:
        return self._content

    async def text(self) -> str:
        return self._content.decode("utf-8")

    async def json(self) -> Any:
        # Каждый вызов разбирает тело заново, исходные байты не меняются
        return json.loads(await self.text())


RequestInterceptor = Callable[[PreparedRequest], Optional[PreparedRequest]]
ResponseInterceptor = Callable[[AiohttpResponse], Awaitable[AiohttpResponse]]


class Interceptors:
    """Цепочки перехватчиков запросов и ответов"""

    def __init__(self):
        self.request: List[RequestInterceptor] = []
        self.response: List[ResponseInterceptor] = []

    def use_request(self, interceptor: RequestInterceptor) -> RequestInterceptor:
        self.request.append(interceptor)
        return interceptor

    def use_response(self, interceptor: ResponseInterceptor) -> ResponseInterceptor:
        self.response.append(interceptor)
        return interceptor


class ConnectionPool:
    """Пул соединений для эффективного управления ресурсами"""

    def __init__(self, max_connections: int = 100, max_connections_per_host: int = 10):
        self.max_connections = max_connections
        self.max_connections_per_host = max_connections_per_host
        self._connector: Optional[TCPConnector] = None

    def get_connector(self) -> TCPConnector:
        if self._connector is None or self._connector.closed:
            self._connector = TCPConnector(
                limit=self.max_connections,
                limit_per_host=self.max_connections_per_host,
                ttl_dns_cache=30,
                use_dns_cache=True,
                keepalive_timeout=60,
                enable_cleanup_closed=True,
            )
        return self._connector

    async def close(self):
        if self._connector and not self._connector.closed:
            await self._connector.close()


class AiohttpClient:
    """HTTP транспорт на базе aiohttp: свой пул, своя сессия и свои перехватчики"""

    def __init__(self):
        self._session: Optional[ClientSession] = None
        self._api_url: Optional[str] = None
        self._timeout: float = 60.0
        self._retries: int = 2
        self._retry_delay: float = 0.5
        self._connection_pool = ConnectionPool()
        self._session_lock = asyncio.Lock()
        self.interceptors = Interceptors()

    def initialize(
        self,
        api_url: str,
        timeout: float = 60.0,
        retries: int = 2,
        max_connections: int = 100,
        max_connections_per_host: int = 10,
    ) -> "AiohttpClient":
        """Инициализация транспорта с настройками"""
        self._api_url = str(api_url).rstrip("/")
        self._timeout = float(timeout)
        self._retries = max(0, int(retries))
        self._connection_pool = ConnectionPool(max_connections, max_connections_per_host)
        return self

    async def _ensure_session(self) -> ClientSession:
        if self._session is not None and not self._session.closed:
            return self._session

        async with self._session_lock:
            # Двойная проверка внутри блокировки
            if self._session is None or self._session.closed:
                self._session = ClientSession(
                    connector=self._connection_pool.get_connector(),
                    timeout=ClientTimeout(total=self._timeout),
                    trust_env=True,  # Использовать системные прокси
                )

        return self._session

    async def _perform(self, request: PreparedRequest) -> AiohttpResponse:
        """Одна попытка HTTP запроса"""
        session = await self._ensure_session()

        request_kwargs: Dict[str, Any] = {
            "method": request.method,
            "url": request.url,
            "params": request.params,
            "headers": request.headers,
        }
        if isinstance(request.data, (bytes, str, aiohttp.FormData)):
            request_kwargs["data"] = request.data
        elif request.data is not None:
            request_kwargs["json"] = request.data

        async with session.request(**request_kwargs) as response:
            content = await response.read()
            return AiohttpResponse(response.status, response.headers, content)

    async def _send_request(
        self,
        method: str,
        path: str,
        params: Any = None,
        data: Union[dict, list, str, bytes, None] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> AiohttpResponse:
        if not self._api_url:
            raise SendRequestError("API URL is empty", path=path, status_code=400)

        full_url = f"{self._api_url}{path}"
        method = method.upper()
        attempts_left = self._retries + 1 if method in IDEMPOTENT_METHODS else 1

        while True:
            request = PreparedRequest(
                method=method,
                url=full_url,
                params=params,
                data=data,
                headers=dict(headers or {}),
            )
            # Перехватчики запроса срабатывают на каждой попытке
            for interceptor in self.interceptors.request:
                request = interceptor(request) or request

            try:
                logger.debug(f"Making {request.method} request to {request.url}")
                response = await self._perform(request)
                break
            except (ClientError, asyncio.TimeoutError) as exc:
                attempts_left -= 1
                logger.warning(f"Request failed (retries left: {attempts_left}): {exc!r}")
                if not attempts_left:
                    raise SendRequestError(str(exc), path=path, status_code=503) from exc
                await asyncio.sleep(self._retry_delay)

        logger.debug(f"Response status: {response.status_code}")

        for interceptor in self.interceptors.response:
            response = await interceptor(response)

        return response

    async def close(self):
        """Закрытие сессии и освобождение ресурсов"""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

        await self._connection_pool.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
