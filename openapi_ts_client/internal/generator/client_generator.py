import json
import logging
import os
import re
import shutil
from typing import List, Optional, Tuple, Union

from ..types.endpoint import Endpoint, Reference, RequestBody, TagGroups
from ..types.models import CodeBlock, Project
from ..utils.collation import collation_key
from ..utils.naming import build_api_name, create_function_name, slugify
from .templates import templates

logger = logging.getLogger(__name__)

PARAMETER_LOCATIONS = (
    ("path", "Path params"),
    ("query", "Query params"),
    ("header", "Header params"),
    ("cookie", "Cookie params"),
)


def escape_comment_text(value: str) -> str:
    return value.replace("*/", "* /")


def describe_request_body(request_body: Optional[Union[Reference, RequestBody]]) -> str:
    """``required (application/json)`` / ``optional (...)`` либо пустая строка"""
    if request_body is None or isinstance(request_body, Reference):
        return ""
    if not request_body.content:
        return ""

    mime_types = ", ".join(entry.mime_type for entry in request_body.content)
    state = "required" if request_body.required else "optional"
    return f"{state} ({mime_types})" if mime_types else state


def build_doc_comment(tag: str, endpoint: Endpoint) -> str:
    """JSDoc комментарий эндпоинта"""
    lines = ["/**", f" * [{escape_comment_text(tag)}] {endpoint.method} {endpoint.path}"]

    if endpoint.summary:
        lines.append(f" * {escape_comment_text(endpoint.summary)}")
    if endpoint.description:
        for line in re.split(r"\r?\n", endpoint.description):
            if line:
                lines.append(f" * {escape_comment_text(line)}")

    for location, label in PARAMETER_LOCATIONS:
        names = endpoint.parameter_names(location)
        if names:
            lines.append(f" * {label}: {', '.join(names)}")

    body_description = describe_request_body(endpoint.request_body)
    if body_description:
        lines.append(f" * Body: {body_description}")

    statuses = ", ".join(response.status for response in endpoint.responses)
    if statuses:
        lines.append(f" * Responses: {statuses}")

    if endpoint.deprecated:
        lines.append(" * @deprecated")

    lines.append(" */")
    return "\n".join(lines)


def build_function(function_name: str, endpoint: Endpoint) -> str:
    # json.dumps дает корректный строковый литерал TS
    return templates.function.format(
        name=function_name,
        method=json.dumps(endpoint.method),
        path=json.dumps(endpoint.path, ensure_ascii=False),
    )


def build_api_object(api_name: str, function_names: List[str]) -> str:
    body = "".join(f"\t{name},\n" for name in function_names)
    return f"export const {api_name} = {{\n{body}}} as const;"


def build_index_file(slugs: List[str]) -> str:
    lines = ['export * from "./core";']
    lines.extend(f'export * from "./{slug}";' for slug in slugs)
    return "\n".join(lines)


def build_core_file(base_url_env: Optional[str] = None) -> List[str]:
    """Блоки кода core.ts"""
    if not base_url_env:
        return [
            templates.core_types,
            templates.core_request.replace("__BASE_URL__", "config.baseUrl"),
            templates.core_build_url,
            templates.core_resolve_body,
        ]

    return [
        templates.core_types,
        templates.core_default_base_url,
        templates.core_request.replace(
            "__BASE_URL__", "config.baseUrl ?? DEFAULT_BASE_URL"
        ),
        templates.core_build_url,
        templates.core_resolve_body,
        templates.core_resolve_default_base_url.format(env_name=base_url_env),
    ]


class ClientGenerator:
    """Генератор TypeScript клиента: core.ts, модуль на каждый тег и index.ts"""

    def __init__(self, collections: TagGroups, base_url_env: Optional[str] = None):
        self.collections = collections
        self.base_url_env = base_url_env
        self.project = Project(name="api")

    def generate(self) -> Project:
        core_file = self.project.add_file("core.ts", header=templates.core_header)
        for block in build_core_file(self.base_url_env):
            core_file.add_code_block(block)

        slugs = []
        for tag in sorted(self.collections, key=collation_key):
            slug, _ = self._generate_tag_module(tag, self.collections[tag])
            slugs.append(slug)

        self.project.add_file("index.ts").add_code_block(build_index_file(slugs))
        return self.project

    def _generate_tag_module(self, tag: str, endpoints: List[Endpoint]) -> Tuple[str, str]:
        """Модуль тега; возвращает (slug, имя агрегирующего объекта)"""
        slug = slugify(tag)
        api_name = build_api_name(tag)

        tag_file = self.project.add_file(
            f"{slug}.ts",
            header=templates.tag_header.format(tag=escape_comment_text(tag).replace("\n", " ")),
            imports=list(templates.tag_imports),
        )

        used_names = set()
        function_names = []
        for endpoint in endpoints:
            function_name = create_function_name(endpoint, used_names)
            function_names.append(function_name)
            tag_file.add_code_block(
                CodeBlock(
                    code=build_doc_comment(tag, endpoint)
                    + "\n"
                    + build_function(function_name, endpoint)
                )
            )

        tag_file.add_code_block(build_api_object(api_name, function_names))
        return slug, api_name


def write_project(project: Project, target_dir: str) -> List[str]:
    """
    Полная перезапись директории клиента.

    Директория удаляется и создается заново, затем файлы пишутся по очереди.
    Ошибки файловой системы не перехватываются.
    """
    if os.path.exists(target_dir):
        shutil.rmtree(target_dir)
    os.makedirs(target_dir, exist_ok=True)

    written = []
    for code_file in project.files:
        path = os.path.join(target_dir, code_file.file_name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(str(code_file))
        logger.debug("Записан %s", path)
        written.append(path)

    logger.info("Клиент записан в %s (%d файлов)", target_dir, len(written))
    return written
