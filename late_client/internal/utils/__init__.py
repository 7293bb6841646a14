"""Утилиты для генератора"""

from .naming import (
    class_name,
    docstring_text,
    namespace_from_tag,
    synthesize_method_name,
)

__all__ = [
    "class_name",
    "docstring_text",
    "namespace_from_tag",
    "synthesize_method_name",
]
