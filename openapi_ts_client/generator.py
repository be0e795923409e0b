"""
Главный модуль генератора - чистый интерфейс
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import OpenApiConfig
from .internal.generator.client_generator import ClientGenerator, write_project
from .internal.generator.postman_generator import PostmanGenerator, write_collections
from .internal.parser.loader import load_spec
from .internal.parser.openapi import OpenApiParser
from .internal.types.endpoint import TagGroups
from .internal.types.models import Project

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Результат генерации: TypeScript проект и Postman коллекции"""

    title: str
    endpoints: TagGroups
    project: Project
    collections: Dict[str, Dict[str, Any]]

    @property
    def tag_count(self) -> int:
        return len(self.endpoints)

    @property
    def endpoint_count(self) -> int:
        return sum(len(items) for items in self.endpoints.values())

    def summary(self) -> str:
        return f"Generated {self.tag_count} tag modules with {self.endpoint_count} endpoints."


class ApiClientGenerator:
    """Чистый интерфейс для генерации TypeScript клиентов и Postman коллекций"""

    def __init__(
        self,
        openapi_spec: Dict[str, Any],
        source_name: str = "swagger.json",
        base_url_env: Optional[str] = None,
    ):
        self.parser = OpenApiParser(openapi_spec)
        self.source_name = source_name
        self.base_url_env = base_url_env

    def generate(self) -> GenerationResult:
        """Генерация без записи на диск"""
        endpoints = self.parser.parse()
        title = self.parser.title

        project = ClientGenerator(endpoints, base_url_env=self.base_url_env).generate()
        collections = PostmanGenerator(
            endpoints, api_title=title, source_name=self.source_name
        ).build()

        return GenerationResult(
            title=title, endpoints=endpoints, project=project, collections=collections
        )

    def write(self, client_dir: str, postman_dir: str) -> GenerationResult:
        """Генерация и запись: сначала клиент, затем коллекции"""
        result = self.generate()
        write_project(result.project, client_dir)
        asyncio.run(write_collections(result.collections, postman_dir))
        return result


def run(config: OpenApiConfig, root: str = ".") -> GenerationResult:
    """
    Полный цикл генерации по конфигурации.

    Относительные пути конфигурации считаются от ``root``. Спецификация
    загружается до того, как будет затронут хотя бы один выходной файл.
    """
    spec_source = config.spec
    if not spec_source.startswith(("http://", "https://")):
        spec_source = os.path.join(root, spec_source)

    openapi_spec = load_spec(spec_source, resolve_refs=config.resolve_refs)

    generator = ApiClientGenerator(
        openapi_spec,
        source_name=os.path.basename(config.spec.rstrip("/")) or config.spec,
        base_url_env=config.base_url_env,
    )
    return generator.write(
        client_dir=os.path.join(root, config.client_dir),
        postman_dir=os.path.join(root, config.postman_dir),
    )
