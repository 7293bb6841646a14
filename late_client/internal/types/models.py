import logging
from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

HttpMethod = Literal["get", "post", "put", "patch", "delete"]
SUPPORTED_METHODS: Tuple[str, ...] = ("get", "post", "put", "patch", "delete")


class OperationDescriptor(BaseModel):
    """Одна операция OpenAPI: путь + HTTP метод"""

    model_config = ConfigDict(frozen=True)

    path: str
    method: HttpMethod
    tags: Tuple[str, ...] = ()
    operation_id: Optional[str] = None
    summary: Optional[str] = None


class MethodBinding(BaseModel):
    """Публичное имя метода и операция, которую он вызывает"""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    method: HttpMethod
    summary: Optional[str] = None


class Namespace(BaseModel):
    name: str
    class_name: str
    description: str

    methods: Dict[str, MethodBinding] = {}
    children: Dict[str, "Namespace"] = {}

    def add_method(self, binding: MethodBinding) -> MethodBinding:
        """Добавление метода; при совпадении имён побеждает последний"""
        if binding.name in self.methods:
            previous = self.methods[binding.name]
            logger.warning(
                f"Method name collision in '{self.name}': {binding.name} "
                f"({previous.method.upper()} {previous.path}) replaced by "
                f"{binding.method.upper()} {binding.path}"
            )
        self.methods[binding.name] = binding
        return binding

    def add_child(self, child: "Namespace") -> "Namespace":
        return self.children.setdefault(child.name, child)

    @property
    def method_count(self) -> int:
        return len(self.methods) + sum(
            child.method_count for child in self.children.values()
        )


Namespace.model_rebuild()

NamespaceMap = Dict[str, Namespace]


def _indent(code: str) -> str:
    return "\n".join(f"    {line}" if line else "" for line in code.split("\n"))


class CodeBlock(BaseModel):
    code: str = "pass"

    def __str__(self):
        return self.code.replace("\t", "    ")


class Function(BaseModel):
    name: str
    parameters: List[str] = []
    response: Optional[str] = "None"

    async_def: bool = False
    decorators: List[str] = []

    description: Optional[str] = None
    code: Optional[CodeBlock] = None

    def __str__(self) -> str:
        signature = (
            f"{'async ' if self.async_def else ''}def {self.name}"
            f"({', '.join(self.parameters)})"
        )
        if self.response:
            signature += f" -> {self.response}"

        body = []
        if self.description:
            body.append(f'"""{self.description}"""')
        if self.code:
            body.append(str(self.code))

        lines = self.decorators + [signature + ":", _indent("\n".join(body) or "pass")]
        return "\n".join(lines)


class Class(BaseModel):
    name: str
    inherits: List[str] = []
    description: Optional[str] = None

    code_blocks: List[CodeBlock] = []
    functions: Dict[str, Function] = {}

    def __str__(self) -> str:
        header = f"class {self.name}"
        if self.inherits:
            header += f"({', '.join(self.inherits)})"

        members = []
        if self.description:
            members.append(f'"""{self.description}"""')
        members.extend(str(block) for block in self.code_blocks)
        members.extend(str(function) for function in self.functions.values())

        return header + ":\n" + _indent("\n\n".join(members) or "pass")

    def add_function(self, function: Union[Function, str], **kwargs) -> Function:
        if isinstance(function, str):
            function = Function(name=function, **kwargs)

        self.functions[function.name] = function
        return function

    def add_code_block(self, code_block: Union[CodeBlock, str]) -> "Class":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block)

        self.code_blocks.append(code_block)
        return self


class CodeFile(BaseModel):
    file_name: str

    imports: List[str] = []
    classes: Dict[str, Class] = {}

    def __str__(self):
        sections = []
        if self.imports:
            sections.append("\n".join(self.imports))
        sections.extend(str(cls) for cls in self.classes.values())
        return "\n\n\n".join(sections) + "\n"

    def add_class(self, cls: Union[Class, str], **kwargs) -> Class:
        if isinstance(cls, str):
            cls = Class(name=cls, **kwargs)

        self.classes[cls.name] = cls
        return cls


class Project(BaseModel):
    name: str
    files: List[CodeFile] = []

    def add_file(self, file_name: str, **kwargs) -> CodeFile:
        code_file = CodeFile(file_name=file_name, **kwargs)
        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None
