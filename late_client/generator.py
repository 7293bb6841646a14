"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Any, Dict

from .internal.generator.client_generator import ClientGenerator
from .internal.parser.openapi import OpenApiParser
from .internal.types.models import NamespaceMap, Project


class ApiClientGenerator:
    """Чистый интерфейс для генерации клиента Late API"""

    def __init__(self, openapi_spec: Dict[str, Any]):
        self.parser = OpenApiParser(openapi_spec)
        self.namespaces: NamespaceMap = {}

    def generate(self) -> Project:
        """Генерация проекта клиента"""
        client_generator = ClientGenerator(self.parser.parse())
        project = client_generator.generate()
        self.namespaces = client_generator.namespaces
        return project


def generate_client(openapi_spec: Dict[str, Any]) -> Project:
    """Создание клиента из OpenAPI спецификации"""
    return ApiClientGenerator(openapi_spec).generate()
