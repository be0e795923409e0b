import asyncio
import json
import logging
import os
import re
import uuid
from typing import Any, Dict, List, Optional

import aiofiles

from ..types.endpoint import ContentEntry, Endpoint, RequestBody, TagGroups
from ..utils.naming import slugify
from .templates import templates

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^}]+)\}")


def find_body_content(endpoint: Endpoint) -> Optional[ContentEntry]:
    """Первый JSON-подобный контент тела запроса, иначе первый любой"""
    request_body = endpoint.request_body
    if not isinstance(request_body, RequestBody) or not request_body.content:
        return None

    for entry in request_body.content:
        if "json" in entry.mime_type:
            return entry
    return request_body.content[0]


def build_postman_url(endpoint: Endpoint) -> Dict[str, Any]:
    path = endpoint.path
    url: Dict[str, Any] = {
        "raw": f"{{{{baseUrl}}}}{path}",
        "host": ["{{baseUrl}}"],
        "path": [
            _PLACEHOLDER.sub(r":\1", segment)
            for segment in path.lstrip("/").split("/")
            if segment
        ],
    }

    # Уникальные плейсхолдеры в порядке первого появления
    placeholders = list(dict.fromkeys(_PLACEHOLDER.findall(path)))
    url["variable"] = [
        {"key": name, "value": "", "description": f"Path parameter {name}"}
        for name in placeholders
    ]

    query_params = endpoint.query_parameters()
    if query_params:
        query = []
        for param in query_params:
            entry = {"key": param.name if param.name is not None else "param", "value": ""}
            if param.description is not None:
                entry["description"] = param.description
            entry["disabled"] = not param.required
            query.append(entry)
        url["query"] = query

    return url


def build_postman_request(endpoint: Endpoint) -> Dict[str, Any]:
    headers: List[Dict[str, str]] = []
    request: Dict[str, Any] = {"method": endpoint.method, "header": headers}

    content = find_body_content(endpoint)
    if content is not None:
        headers.append({"key": "Content-Type", "value": content.mime_type})
        request["body"] = {
            "mode": "raw",
            "raw": templates.postman_raw_body,
            "options": {
                "raw": {"language": "json" if "json" in content.mime_type else "text"}
            },
        }

    request["url"] = build_postman_url(endpoint)

    description = endpoint.description if endpoint.description is not None else endpoint.summary
    if description is not None:
        request["description"] = description

    return request


class PostmanGenerator:
    """Генератор Postman коллекций (v2.1), по одной на тег"""

    def __init__(
        self,
        collections: TagGroups,
        api_title: str = "API",
        source_name: str = "swagger.json",
    ):
        self.collections = collections
        self.api_title = api_title
        self.source_name = source_name

    def build_collection(self, tag: str, endpoints: List[Endpoint]) -> Dict[str, Any]:
        return {
            "info": {
                "name": f"{self.api_title} - {tag}",
                "_postman_id": str(uuid.uuid4()),
                "schema": templates.postman_schema,
                "description": f"Auto-generated from {self.source_name} for the {tag} tag.",
            },
            "item": [
                {"name": endpoint.name, "request": build_postman_request(endpoint)}
                for endpoint in endpoints
            ],
            "variable": [
                {
                    "key": "baseUrl",
                    "value": "{{baseUrl}}",
                    "description": templates.postman_base_url_description,
                }
            ],
        }

    def build(self) -> Dict[str, Dict[str, Any]]:
        """Имя файла -> документ коллекции"""
        return {
            f"{slugify(tag)}.postman_collection.json": self.build_collection(tag, endpoints)
            for tag, endpoints in self.collections.items()
        }


def serialize_collection(collection: Dict[str, Any]) -> str:
    return json.dumps(collection, indent=2, ensure_ascii=False) + "\n"


async def _write_file(path: str, content: str) -> str:
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(content)
    logger.debug("Записан %s", path)
    return path


async def write_collections(collections: Dict[str, Dict[str, Any]], target_dir: str) -> List[str]:
    """
    Параллельная запись коллекций.

    Директория создается при необходимости и не очищается: файлы удаленных
    тегов и добавленные вручную коллекции остаются на месте.
    """
    os.makedirs(target_dir, exist_ok=True)

    written = await asyncio.gather(
        *(
            _write_file(os.path.join(target_dir, file_name), serialize_collection(collection))
            for file_name, collection in collections.items()
        )
    )

    logger.info("Postman коллекции записаны в %s (%d файлов)", target_dir, len(written))
    return list(written)
