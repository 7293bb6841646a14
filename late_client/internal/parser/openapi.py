import logging
from typing import Any, Dict, List

from ..types.models import OperationDescriptor, SUPPORTED_METHODS

logger = logging.getLogger(__name__)


class OpenApiParser:
    """Парсер OpenAPI спецификации в список операций"""

    def __init__(self, openapi_dict: Dict[str, Any]):
        self.openapi_dict = openapi_dict or {}

    def parse(self) -> List[OperationDescriptor]:
        """Операции в порядке обхода путей и методов спецификации"""
        operations = []

        for path, path_spec in (self.openapi_dict.get("paths") or {}).items():
            if not isinstance(path_spec, dict):
                continue

            for method, method_spec in path_spec.items():
                # parameters, summary, head, options и прочее не входят в контракт
                if method not in SUPPORTED_METHODS:
                    logger.debug(f"Skipping '{method}' in {path}")
                    continue

                method_spec = method_spec or {}
                operations.append(
                    OperationDescriptor(
                        path=path,
                        method=method,
                        tags=tuple(method_spec.get("tags") or ()),
                        operation_id=method_spec.get("operationId") or None,
                        summary=method_spec.get("summary") or None,
                    )
                )

        return operations
