"""Утилиты для генератора"""

from .collation import collation_key
from .naming import (
    build_api_name,
    capitalize,
    create_function_name,
    generate_operation_id,
    sanitize_identifier,
    slugify,
    to_camel_case,
    to_pascal_case,
)

__all__ = [
    "build_api_name",
    "capitalize",
    "collation_key",
    "create_function_name",
    "generate_operation_id",
    "sanitize_identifier",
    "slugify",
    "to_camel_case",
    "to_pascal_case",
]
