"""Утилиты для построения имён namespace-ов, классов и методов"""

import re
from typing import Optional

_PATH_PARAM = re.compile(r"\{([^{}]+)\}")
_VERSION_SEGMENT = re.compile(r"^v\d+$", re.IGNORECASE)
_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z]+")

VERB_PREFIXES = {
    "post": "create",
    "put": "update",
    "patch": "update",
    "delete": "delete",
}


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def namespace_from_tag(tag: str) -> str:
    """
    Имя namespace для тега без записи в таблице алиасов.

    Examples:
        >>> namespace_from_tag("Team Members")
        'teammembers'
        >>> namespace_from_tag("Other")
        'other'
    """
    name = re.sub(r"[^0-9a-z_]", "", tag.lower())
    if not name:
        return "other"
    if name[0].isdigit():
        name = "_" + name
    return name


def synthesize_method_name(path: str, method: str) -> str:
    """
    Имя метода для операции без operationId.

    Префикс зависит от HTTP метода (get без параметров пути -> list),
    сегменты пути склеиваются в camelCase, {param} превращается в By<Param>,
    версионные сегменты (v1, v2) отбрасываются.

    Examples:
        >>> synthesize_method_name("/v1/posts", "get")
        'listPosts'
        >>> synthesize_method_name("/v1/posts/{postId}", "get")
        'getPostsByPostId'
        >>> synthesize_method_name("/v1/api-keys/{key_id}", "delete")
        'deleteApiKeysByKeyId'
    """
    if method == "get":
        prefix = "get" if _PATH_PARAM.search(path) else "list"
    else:
        prefix = VERB_PREFIXES.get(method, method)

    words = []
    for segment in path.strip("/").split("/"):
        if not segment or _VERSION_SEGMENT.match(segment):
            continue
        segment = _PATH_PARAM.sub(lambda match: f" By {match.group(1)} ", segment)
        words.extend(word for word in _NON_IDENTIFIER.split(segment) if word)

    return prefix + "".join(_capitalize(word) for word in words)


def class_name(namespace: str, parent: Optional[str] = None) -> str:
    """accountGroups -> AccountGroups, (telegram, Connect) -> ConnectTelegram"""
    name = _capitalize(namespace.lstrip("_")) or "Other"
    return f"{parent}{name}" if parent else name


def docstring_text(text: str) -> str:
    """Первая строка описания, безопасная для однострочного docstring"""
    lines = text.strip().splitlines()
    if not lines:
        return ""
    return lines[0].strip().replace("\\", "\\\\").replace('"', '\\"')
