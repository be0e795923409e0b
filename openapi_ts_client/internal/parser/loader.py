import json
import logging
import os
from typing import Any, Dict

import httpx
import jsonref

logger = logging.getLogger(__name__)


class SpecLoadError(ValueError):
    """Спецификацию не удалось прочитать или разобрать"""


def load_spec(source: str, resolve_refs: bool = False) -> Dict[str, Any]:
    """
    Загрузка OpenAPI спецификации из файла или по URL.

    Args:
        source: путь к JSON файлу или http(s) URL
        resolve_refs: заменить ``$ref`` на объекты, на которые они указывают

    Raises:
        SpecLoadError: файл не читается, URL не отвечает или документ не JSON объект
    """
    if source.startswith(("http://", "https://")):
        logger.info("Загрузка спецификации по URL %s", source)
        try:
            response = httpx.get(source, follow_redirects=True)
            response.raise_for_status()
            document = response.json()
        except httpx.HTTPError as e:
            raise SpecLoadError(f"Не удалось загрузить спецификацию из {source}: {e}") from e
        except json.JSONDecodeError as e:
            raise SpecLoadError(f"Ответ {source} не является JSON: {e}") from e
    else:
        logger.info("Чтение спецификации из %s", os.path.abspath(source))
        try:
            with open(source, "r", encoding="utf-8") as f:
                document = json.load(f)
        except OSError as e:
            raise SpecLoadError(f"Не удалось прочитать {source}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SpecLoadError(f"Файл {source} не является корректным JSON: {e}") from e

    if not isinstance(document, dict):
        raise SpecLoadError(f"Спецификация {source} должна быть JSON объектом")

    if resolve_refs:
        # Ссылки заменяются самими объектами, а не прокси
        document = jsonref.replace_refs(document, proxies=False, lazy_load=False)

    return document
