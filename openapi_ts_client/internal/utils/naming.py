"""Утилиты для построения имен функций, модулей и файлов"""

import re
from typing import Set

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WORD_SEPARATORS = re.compile(r"[\s_\-./:\\]+")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_IDENTIFIER_START = re.compile(r"^[A-Za-z_]")

# Зарезервированные слова JavaScript/TypeScript в модулях (strict mode)
RESERVED_WORDS = frozenset(
    (
        "await break case catch class const continue debugger default delete do else enum "
        "export extends false finally for function if implements import in instanceof "
        "interface let new null package private protected public return static super "
        "switch this throw true try typeof var void while with yield"
    ).split()
)


def capitalize(value: str) -> str:
    """Первая буква в верхний регистр, остальное без изменений"""
    if not value:
        return ""
    return value[0].upper() + value[1:]


def to_pascal_case(value: str) -> str:
    """
    PascalCase из произвольной строки.

    Граница camelCase превращается в пробел, затем строка режется по
    пробелам и символам ``_ - . / : \\``. Каждое слово приводится к нижнему
    регистру и начинается с заглавной буквы.

    Examples:
        >>> to_pascal_case("clubMembers")
        'ClubMembers'
        >>> to_pascal_case("SportsPlatform.Api")
        'SportsPlatformApi'
        >>> to_pascal_case("get_/api/clubs/{clubId}")
        'GetApiClubs{clubId}'
    """
    words = [w for w in _WORD_SEPARATORS.split(_CASE_BOUNDARY.sub(r"\1 \2", value)) if w]
    return "".join(capitalize(word.lower()) for word in words)


def to_camel_case(value: str) -> str:
    pascal = to_pascal_case(value)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


def sanitize_identifier(value: str) -> str:
    """
    Безопасное имя функции для TypeScript.

    Examples:
        >>> sanitize_identifier("get_/ping")
        'getPing'
        >>> sanitize_identifier("2fa-verify")
        'endpoint2faVerify'
        >>> sanitize_identifier("***")
        'endpoint'
        >>> sanitize_identifier("delete")
        'endpointDelete'
    """
    name = _NON_ALNUM.sub("", to_camel_case(value))
    if not name:
        name = "endpoint"
    if not _IDENTIFIER_START.match(name) or name in RESERVED_WORDS:
        name = f"endpoint{capitalize(name)}"
    return name


def create_function_name(endpoint, used_names: Set[str]) -> str:
    """
    Имя функции эндпоинта, уникальное в пределах одного модуля тега.

    При совпадении к базовому имени добавляется 2, 3, ... Выбранное имя
    записывается в ``used_names``.
    """
    raw = endpoint.operation_id
    if raw is None:
        raw = f"{endpoint.method}_{endpoint.path}"

    base = sanitize_identifier(raw)
    candidate = base
    counter = 2

    while candidate in used_names:
        candidate = f"{base}{counter}"
        counter += 1

    used_names.add(candidate)
    return candidate


def build_api_name(tag: str) -> str:
    """Имя агрегирующего объекта модуля: ``Posts`` -> ``PostsApi``"""
    base = to_pascal_case(tag) or "Untagged"
    sanitized = _NON_ALNUM.sub("", base) or "Untagged"
    if not _IDENTIFIER_START.match(sanitized):
        return f"Api{sanitized}Api"
    return f"{sanitized}Api"


def slugify(value: str) -> str:
    """Имя файла для тега: ``Club Members`` -> ``club-members``"""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "untagged"


def generate_operation_id(method: str, path: str) -> str:
    """Синтетический operationId: ``get`` + ``/items/{id}`` -> ``get_items_id``"""
    segments = [s for s in re.sub(r"[{}]", "", path).split("/") if s]
    return f"{method}_{'_'.join(segments) or 'root'}"
