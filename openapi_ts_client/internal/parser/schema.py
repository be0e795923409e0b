from collections.abc import Mapping
from typing import Any, Optional, Set

from ..types.endpoint import SchemaSummary

_PASS_THROUGH = ("type", "format", "enum", "description")
_COMPOSITION = ("oneOf", "anyOf", "allOf")


def summarize_schema(schema: Any) -> Optional[SchemaSummary]:
    """
    Компактное описание JSON-схемы.

    Ссылки ``$ref`` не разрешаются и сохраняются как ``ref``. Узел, который
    повторно встретился на текущем пути рекурсии (возможно только после
    разрешения ссылок через jsonref), заменяется на ``{"circular": True}``.
    """
    return _summarize(schema, set())


def _summarize(schema: Any, active: Set[int]) -> Optional[SchemaSummary]:
    if not isinstance(schema, Mapping):
        return None

    if id(schema) in active:
        return {"circular": True}
    active.add(id(schema))

    try:
        summary: SchemaSummary = {}

        if "$ref" in schema:
            summary["ref"] = schema["$ref"]
        for key in _PASS_THROUGH:
            if schema.get(key) is not None:
                summary[key] = schema[key]
        if isinstance(schema.get("nullable"), bool):
            summary["nullable"] = schema["nullable"]
        if "default" in schema:
            summary["default"] = schema["default"]

        if "items" in schema:
            summary["items"] = _summarize(schema["items"], active)

        properties = schema.get("properties")
        if isinstance(properties, Mapping):
            summary["properties"] = {
                name: _summarize(value, active) for name, value in properties.items()
            }

        additional = schema.get("additionalProperties")
        if isinstance(additional, Mapping):
            summary["additionalProperties"] = _summarize(additional, active)

        for keyword in _COMPOSITION:
            variants = schema.get(keyword)
            if isinstance(variants, list):
                summary[keyword] = [_summarize(entry, active) for entry in variants]

        return summary
    finally:
        active.discard(id(schema))
