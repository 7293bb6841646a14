"""
Конфигурация генератора и клиента Late API
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional

import toml
from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingApiKeyError

DEFAULT_BASE_URL = "https://getlate.dev/api"
API_KEY_ENV = "LATE_API_KEY"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2

DEFAULT_CONFIG_FILE = "openapi.toml"
DEFAULT_SPEC_PATH = "openapi.yaml"
DEFAULT_DIRNAME = "late_client"


@dataclass
class OpenApiConfig:
    """Конфигурация генератора клиента"""

    url: Optional[str] = None
    spec: str = DEFAULT_SPEC_PATH
    dirname: str = DEFAULT_DIRNAME

    @classmethod
    def from_file(
        cls, config_path: str = DEFAULT_CONFIG_FILE, search_dir: str = None
    ) -> Optional["OpenApiConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, DEFAULT_CONFIG_FILE)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError):
            return None

        return cls(
            url=config_data.get("url"),
            spec=config_data.get("spec", DEFAULT_SPEC_PATH),
            dirname=config_data.get("dirname", DEFAULT_DIRNAME),
        )

    def save_to_file(self, config_path: str = DEFAULT_CONFIG_FILE) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {"spec": self.spec, "dirname": self.dirname}
        if self.url:
            config_data["url"] = self.url

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "OpenApiConfig":
        """Объединение с аргументами командной строки"""
        return OpenApiConfig(
            url=getattr(args, "url", None) or self.url,
            spec=getattr(args, "spec", None) or self.spec,
            dirname=getattr(args, "dirname", None) or self.dirname,
        )


class ClientOptions(BaseModel):
    """Настройки клиента, фиксируются при создании"""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    default_headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        default_headers: Optional[Dict[str, str]] = None,
    ) -> "ClientOptions":
        """
        Разрешение настроек: явные аргументы, затем окружение, затем значения по умолчанию.

        Raises:
            MissingApiKeyError: ключ не передан и LATE_API_KEY пуст
        """
        if api_key is None:
            api_key = os.environ.get(API_KEY_ENV)

        if not api_key:
            raise MissingApiKeyError()

        return cls(
            api_key=api_key,
            base_url=base_url or DEFAULT_BASE_URL,
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
            max_retries=DEFAULT_MAX_RETRIES if max_retries is None else max_retries,
            default_headers=dict(default_headers or {}),
        )
