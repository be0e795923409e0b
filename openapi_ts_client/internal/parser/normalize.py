"""
Нормализация параметров, тел запросов и ответов OpenAPI.

Спецификации часто правятся руками, поэтому фрагменты неожиданной формы
не считаются ошибкой: они пропускаются или получают значения по умолчанию.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from ..types.endpoint import (
    ContentEntry,
    Header,
    Parameter,
    Reference,
    RequestBody,
    Response,
)
from .schema import summarize_schema

logger = logging.getLogger(__name__)


def _flag(value: Any) -> bool:
    """``required``/``deprecated``: отсутствие значения -> False"""
    return False if value is None else bool(value)


def merge_parameters(
    path_params: Any, operation_params: Any
) -> List[Union[Reference, Parameter]]:
    """
    Объединение параметров пути и операции.

    Сначала идут параметры уровня пути, затем операции. Ключ параметра -
    ``$ref`` либо ``"{name}:{in}"``; при повторе остается первое вхождение.
    """
    combined = list(path_params) if isinstance(path_params, list) else []
    if isinstance(operation_params, list):
        combined.extend(operation_params)

    seen: Dict[str, Union[Reference, Parameter]] = {}
    for param in combined:
        if not isinstance(param, Mapping):
            if param is not None:
                logger.debug("Пропущен параметр неожиданного вида: %r", param)
            continue

        key = param.get("$ref")
        if key is None:
            key = f"{param.get('name')}:{param.get('in')}"
        if key not in seen:
            seen[key] = normalize_parameter(param)

    return list(seen.values())


def normalize_parameter(param: Mapping) -> Union[Reference, Parameter]:
    if param.get("$ref") is not None:
        return Reference(ref=param["$ref"])

    return Parameter(
        name=param.get("name"),
        location=param.get("in"),
        required=_flag(param.get("required")),
        description=param.get("description"),
        schema_summary=summarize_schema(param.get("schema")),
        deprecated=_flag(param.get("deprecated")),
        allow_empty_value=_flag(param.get("allowEmptyValue")),
        style=param.get("style"),
        explode=param.get("explode"),
    )


def normalize_request_body(request_body: Any) -> Optional[Union[Reference, RequestBody]]:
    if not isinstance(request_body, Mapping):
        return None
    if request_body.get("$ref") is not None:
        return Reference(ref=request_body["$ref"])

    return RequestBody(
        description=request_body.get("description"),
        required=_flag(request_body.get("required")),
        content=normalize_content(request_body.get("content")),
    )


def normalize_content(content: Any) -> Optional[List[ContentEntry]]:
    """None - контента нет вовсе, [] - пустой словарь content"""
    if not isinstance(content, Mapping):
        return None

    entries = []
    for mime_type, media in content.items():
        media = media if isinstance(media, Mapping) else {}
        entries.append(
            ContentEntry(
                mime_type=mime_type,
                schema_summary=summarize_schema(media.get("schema")),
                example=media.get("example"),
                examples=media.get("examples"),
            )
        )
    return entries


def normalize_headers(headers: Any) -> Optional[List[Header]]:
    if not isinstance(headers, Mapping):
        return None

    result = []
    for name, header in headers.items():
        header = header if isinstance(header, Mapping) else {}
        if header.get("$ref") is not None:
            result.append(Header(name=name, ref=header["$ref"]))
            continue

        result.append(
            Header(
                name=name,
                description=header.get("description"),
                required=_flag(header.get("required")),
                deprecated=_flag(header.get("deprecated")),
                schema_summary=summarize_schema(header.get("schema")),
            )
        )
    return result


def normalize_responses(responses: Any) -> List[Response]:
    """Список ответов в порядке объявления статусов"""
    if not isinstance(responses, Mapping):
        return []

    result = []
    for status, response in responses.items():
        status = str(status)
        if isinstance(response, Mapping) and response.get("$ref") is not None:
            result.append(Response(status=status, ref=response["$ref"]))
            continue

        response = response if isinstance(response, Mapping) else {}
        result.append(
            Response(
                status=status,
                description=response.get("description"),
                headers=normalize_headers(response.get("headers")),
                content=normalize_content(response.get("content")),
            )
        )
    return result
