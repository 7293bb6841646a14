"""
Тесты для системы конфигурации
"""

import os
import tempfile

import pytest
from pydantic import ValidationError as PydanticValidationError

from late_client.config import (
    API_KEY_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientOptions,
    OpenApiConfig,
)
from late_client.errors import LateApiError, MissingApiKeyError


class TestOpenApiConfig:
    """Тесты конфигурации генератора"""

    def test_config_creation(self):
        """Тест создания конфигурации"""
        config = OpenApiConfig(url="https://example.com/openapi.yaml", dirname="sdk")

        assert config.url == "https://example.com/openapi.yaml"
        assert config.dirname == "sdk"
        assert config.spec == "openapi.yaml"

    def test_config_save_and_load(self):
        """Тест сохранения и загрузки конфигурации"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "test_openapi.toml")

            original_config = OpenApiConfig(
                url="https://api.example.com/openapi.yaml",
                spec="specs/late.yaml",
                dirname="example_client",
            )
            original_config.save_to_file(config_path)

            loaded_config = OpenApiConfig.from_file(config_path)

            assert loaded_config == original_config

    def test_config_search_dir(self):
        """Тест поиска openapi.toml в указанной директории"""
        with tempfile.TemporaryDirectory() as temp_dir:
            OpenApiConfig(spec="api.json").save_to_file(
                os.path.join(temp_dir, "openapi.toml")
            )

            loaded_config = OpenApiConfig.from_file(
                "missing.toml", search_dir=temp_dir
            )

            assert loaded_config is not None
            assert loaded_config.spec == "api.json"
            assert loaded_config.url is None

    def test_config_file_not_exists(self):
        """Тест загрузки несуществующего конфига"""
        config = OpenApiConfig.from_file("nonexistent.toml")
        assert config is None

    def test_broken_config_file(self, tmp_path):
        """Битый toml не ломает генератор"""
        config_path = tmp_path / "openapi.toml"
        config_path.write_text("url = [unclosed", encoding="utf-8")

        assert OpenApiConfig.from_file(str(config_path)) is None

    def test_config_merge_with_args(self):
        """Тест объединения конфига с аргументами"""
        config = OpenApiConfig(url="https://old.example.com", dirname="original_client")

        class MockArgs:
            def __init__(self):
                self.url = "https://new.example.com"
                self.spec = None
                self.dirname = None

        merged = config.merge_with_args(MockArgs())

        assert merged.url == "https://new.example.com"  # Переписан из args
        assert merged.dirname == "original_client"  # Остался из config
        assert merged.spec == "openapi.yaml"

    def test_default_values(self):
        """Тест значений по умолчанию"""
        config = OpenApiConfig()

        assert config.url is None
        assert config.spec == "openapi.yaml"
        assert config.dirname == "late_client"


class TestClientOptions:
    """Тесты разрешения настроек клиента"""

    def test_explicit_key_wins_over_env(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "env_key")

        options = ClientOptions.resolve(api_key="explicit_key")

        assert options.api_key == "explicit_key"

    def test_key_from_env(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "env_key")

        assert ClientOptions.resolve().api_key == "env_key"

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)

        with pytest.raises(MissingApiKeyError) as exc_info:
            ClientOptions.resolve()

        assert isinstance(exc_info.value, LateApiError)
        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "missing_api_key"

    def test_empty_env_key(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "")

        with pytest.raises(MissingApiKeyError):
            ClientOptions.resolve()

    def test_defaults(self):
        options = ClientOptions.resolve(api_key="key")

        assert options.base_url == DEFAULT_BASE_URL
        assert options.timeout == DEFAULT_TIMEOUT
        assert options.max_retries == DEFAULT_MAX_RETRIES
        assert options.default_headers == {}

    def test_options_are_frozen(self):
        options = ClientOptions.resolve(api_key="key", base_url="https://a.example")

        with pytest.raises(PydanticValidationError):
            options.base_url = "https://b.example"

    def test_default_headers_are_copied(self):
        headers = {"X-Team": "growth"}
        options = ClientOptions.resolve(api_key="key", default_headers=headers)
        headers["X-Team"] = "changed"

        assert options.default_headers == {"X-Team": "growth"}
