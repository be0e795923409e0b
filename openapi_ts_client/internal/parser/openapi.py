import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from ..types.endpoint import Endpoint, TagGroups
from ..utils.collation import collation_key
from ..utils.naming import generate_operation_id
from .normalize import merge_parameters, normalize_request_body, normalize_responses

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("get", "post", "put", "delete", "patch", "head", "options")

UNTAGGED = "Untagged"


def build_endpoint(
    path_key: str, method: str, operation: Mapping, path_level_params: List[Any]
) -> Endpoint:
    """Endpoint из тройки (путь, метод, операция)"""
    uppercase_method = method.upper()

    operation_id = operation.get("operationId")
    if operation_id is None:
        operation_id = generate_operation_id(method, path_key)

    # operation_id здесь всегда заполнен
    name = operation.get("summary")
    if name is None:
        name = operation_id

    security = operation.get("security")

    return Endpoint(
        id=operation_id,
        name=name,
        summary=operation.get("summary"),
        description=operation.get("description"),
        method=uppercase_method,
        path=path_key,
        operation_id=operation_id,
        deprecated=bool(operation.get("deprecated")),
        parameters=merge_parameters(path_level_params, operation.get("parameters")),
        request_body=normalize_request_body(operation.get("requestBody")),
        responses=normalize_responses(operation.get("responses")),
        security=security if isinstance(security, list) else [],
    )


def _sort_key(endpoint: Endpoint):
    return collation_key(endpoint.name)


class OpenApiParser:
    """Парсер OpenAPI спецификации в эндпоинты, сгруппированные по тегам"""

    def __init__(self, openapi_dict: Dict[str, Any]):
        self.openapi_dict = openapi_dict

    @property
    def title(self) -> str:
        info = self.openapi_dict.get("info")
        if isinstance(info, Mapping) and info.get("title") is not None:
            return str(info["title"])
        return "API"

    def parse(self) -> TagGroups:
        """
        Обход всех путей и методов.

        Операция без тегов попадает в ``Untagged``. Один и тот же объект
        Endpoint добавляется в каждый из тегов операции. Списки сортируются
        по имени эндпоинта.
        """
        grouped: TagGroups = {}

        paths = self.openapi_dict.get("paths")
        if not isinstance(paths, Mapping):
            logger.debug("В спецификации нет объекта paths")
            paths = {}

        for path_key, path_item in paths.items():
            if not isinstance(path_item, Mapping):
                logger.debug("Пропущен путь %s: ожидался объект", path_key)
                continue

            path_level_params = path_item.get("parameters")
            if not isinstance(path_level_params, list):
                path_level_params = []

            for method_key, operation in path_item.items():
                if method_key not in SUPPORTED_METHODS:
                    if method_key != "parameters":
                        logger.debug("Пропущен ключ %s у пути %s", method_key, path_key)
                    continue
                if not isinstance(operation, Mapping):
                    logger.debug("Пропущена операция %s %s: ожидался объект", method_key, path_key)
                    continue

                tags = operation.get("tags")
                if not isinstance(tags, list) or not tags:
                    tags = [UNTAGGED]

                endpoint = build_endpoint(path_key, method_key, operation, path_level_params)

                for tag in tags:
                    grouped.setdefault(str(tag), []).append(endpoint)

        for endpoints in grouped.values():
            endpoints.sort(key=_sort_key)

        return grouped
