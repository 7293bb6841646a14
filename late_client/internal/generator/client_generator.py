import json
import keyword
import logging
from typing import List, Optional

from ...base import BaseClient
from ..types.models import (
    Class,
    CodeBlock,
    Function,
    MethodBinding,
    Namespace,
    NamespaceMap,
    OperationDescriptor,
    Project,
)
from ..utils import class_name, docstring_text, namespace_from_tag, synthesize_method_name

# Теги OpenAPI -> namespace клиента. Несколько тегов могут вести в один namespace
TAG_TO_NAMESPACE = {
    "Posts": "posts",
    "Accounts": "accounts",
    "Profiles": "profiles",
    "Analytics": "analytics",
    "Account Groups": "accountGroups",
    "Queue": "queue",
    "Webhooks": "webhooks",
    "API Keys": "apiKeys",
    "Media": "media",
    "Tools": "tools",
    "Users": "users",
    "Usage": "usage",
    "Logs": "logs",
    "Connect": "connect",
    "Reddit Search": "reddit",
    "Invites": "invites",
    "GMB Reviews": "accounts",
    "LinkedIn Mentions": "accounts",
}

NAMESPACE_DESCRIPTIONS = {
    "posts": "Posts API - Create, schedule, and manage social media posts",
    "accounts": "Accounts API - Manage connected social media accounts",
    "profiles": "Profiles API - Manage workspace profiles",
    "analytics": "Analytics API - Get performance metrics",
    "accountGroups": "Account Groups API - Organize accounts into groups",
    "queue": "Queue API - Manage posting queue",
    "webhooks": "Webhooks API - Configure event webhooks",
    "apiKeys": "API Keys API - Manage API keys",
    "media": "Media API - Upload and manage media files",
    "tools": "Tools API - Media download and utilities",
    "users": "Users API - User management",
    "usage": "Usage API - Get usage statistics",
    "logs": "Logs API - Publishing logs",
    "connect": "Connect API - OAuth connection flows",
    "reddit": "Reddit API - Search and feed",
    "invites": "Invites API - Team invitations",
}

UNTAGGED = "Other"
CONNECT_NAMESPACE = "connect"

# Порядок важен: берётся первая найденная платформа
CONNECT_PLATFORMS = (
    "facebook",
    "googlebusiness",
    "linkedin",
    "pinterest",
    "snapchat",
    "bluesky",
    "telegram",
)
PLATFORM_NAMES = {"googlebusiness": "googleBusiness"}

FILE_HEADER = "# Code generated by late-generate. DO NOT EDIT."
CLIENT_CLASS = "Late"
CLIENT_DESCRIPTION = "Late API client with one attribute per namespace"

# Атрибуты фасада, которые namespace не должен перезаписать
RESERVED_ATTRIBUTES = frozenset(dir(BaseClient)) | {"options", "interceptors", "namespaces"}
# Имена, уже занятые в модуле client.py
RESERVED_CLASSES = frozenset({CLIENT_CLASS, "BaseClient", "Any"})

logger = logging.getLogger(__name__)


def safe_namespace_name(name: str) -> str:
    """Добавляет "_" к имени, которое сломало бы сгенерированный клиент"""
    safe_name = name
    while (
        keyword.iskeyword(safe_name)
        or safe_name in RESERVED_ATTRIBUTES
        or class_name(safe_name) in RESERVED_CLASSES
    ):
        safe_name += "_"

    if safe_name != name:
        logger.warning(f"Namespace '{name}' is reserved, renamed to '{safe_name}'")
    return safe_name


def validate_method_name(name: str, operation: OperationDescriptor) -> str:
    if not name.isidentifier() or keyword.iskeyword(name) or name == "client":
        raise ValueError(
            f"Invalid method name '{name}' for "
            f"{operation.method.upper()} {operation.path}"
        )
    return name


class ClientGenerator:
    """Генератор namespace-ов и файла client.py из операций OpenAPI"""

    def __init__(self, operations: List[OperationDescriptor]):
        self.operations = operations
        self.project = Project(name="late_client")
        self.namespaces: NamespaceMap = {}

    def generate(self) -> Project:
        """Основная генерация"""
        self.group_operations()
        self._generate_client_file()
        return self.project

    def group_operations(self) -> NamespaceMap:
        """Распределение операций по namespace-ам в порядке обнаружения"""
        self.namespaces = {}

        for operation in self.operations:
            namespace = self._ensure_namespace(self._get_namespace_name(operation))

            if namespace.name == CONNECT_NAMESPACE:
                platform = self._get_connect_platform(operation.path)
                if platform:
                    namespace = namespace.add_child(
                        Namespace(
                            name=platform,
                            class_name=class_name(platform, parent=namespace.class_name),
                            description=f"{namespace.description} ({platform})",
                        )
                    )

            namespace.add_method(
                MethodBinding(
                    name=self._get_method_name(operation),
                    path=operation.path,
                    method=operation.method,
                    summary=operation.summary,
                )
            )

        return self.namespaces

    @staticmethod
    def _get_namespace_name(operation: OperationDescriptor) -> str:
        tag = operation.tags[0] if operation.tags else UNTAGGED
        return TAG_TO_NAMESPACE.get(tag) or safe_namespace_name(namespace_from_tag(tag))

    @staticmethod
    def _get_method_name(operation: OperationDescriptor) -> str:
        # operationId используется как есть, уникальность не проверяется
        if operation.operation_id:
            return validate_method_name(operation.operation_id, operation)
        return validate_method_name(
            synthesize_method_name(operation.path, operation.method), operation
        )

    @staticmethod
    def _get_connect_platform(path: str) -> Optional[str]:
        path_lower = path.lower()
        for platform in CONNECT_PLATFORMS:
            if f"/connect/{platform}" in path_lower:
                return PLATFORM_NAMES.get(platform, platform)
        return None

    def _ensure_namespace(self, name: str) -> Namespace:
        if name not in self.namespaces:
            self.namespaces[name] = Namespace(
                name=name,
                class_name=class_name(name),
                description=NAMESPACE_DESCRIPTIONS.get(name, f"{name} API"),
            )
        return self.namespaces[name]

    def _generate_client_file(self):
        client_file = self.project.add_file("client.py")
        client_file.imports.extend(
            [
                FILE_HEADER,
                "from typing import Any",
                "",
                "from .base import BaseClient",
                "from .decorators import delete, get, patch, post, put",
            ]
        )

        for namespace in self.namespaces.values():
            # Вложенные классы объявляются раньше родителя
            for child in namespace.children.values():
                client_file.add_class(self._generate_namespace_class(child))
            client_file.add_class(self._generate_namespace_class(namespace))

        client_file.add_class(self._generate_client_class())

    @staticmethod
    def _generate_namespace_class(namespace: Namespace) -> Class:
        namespace_class = Class(
            name=namespace.class_name, description=namespace.description
        )

        init_code = ["self.client = client"]
        for child in namespace.children.values():
            init_code.append(f"self.{child.name} = {child.class_name}(client)")

        namespace_class.add_function(
            "__init__",
            parameters=["self", "client: BaseClient"],
            code=CodeBlock(code="\n".join(init_code)),
        )

        for binding in namespace.methods.values():
            description = docstring_text(binding.summary or "") or docstring_text(
                f"{binding.method.upper()} {binding.path}"
            )
            namespace_class.add_function(
                Function(
                    name=binding.name,
                    parameters=["self", "**params: Any"],
                    response="Any",
                    async_def=True,
                    # json.dumps даёт корректный строковый литерал Python
                    decorators=[f"@{binding.method}({json.dumps(binding.path)})"],
                    description=description,
                )
            )

        return namespace_class

    def _generate_client_class(self) -> Class:
        client_class = Class(
            name=CLIENT_CLASS, inherits=["BaseClient"], description=CLIENT_DESCRIPTION
        )

        names = "\n".join(f'    "{name}",' for name in self.namespaces)
        client_class.add_code_block(f"namespaces = (\n{names}\n)")

        assignments = ["super().__init__(*args, **kwargs)"]
        for namespace in self.namespaces.values():
            assignments.append(
                f"self.{namespace.name}: {namespace.class_name} = "
                f"{namespace.class_name}(self)"
            )

        client_class.add_function(
            "__init__",
            parameters=["self", "*args: Any", "**kwargs: Any"],
            code=CodeBlock(code="\n".join(assignments)),
        )

        return client_class
