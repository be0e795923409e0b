import argparse
import logging
import os
import sys
from typing import List, Optional

from openapi_ts_client.config import CONFIG_FILE_NAME, OpenApiConfig
from openapi_ts_client.generator import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript клиентов и Postman коллекций из OpenAPI"
    )
    parser.add_argument(
        "--root", type=str, default=".", help="Корень проекта (по умолчанию текущая директория)"
    )
    parser.add_argument("--spec", type=str, help="Путь или URL к OpenAPI спецификации")
    parser.add_argument("--client-dir", type=str, help="Директория TypeScript клиента")
    parser.add_argument("--postman-dir", type=str, help="Директория Postman коллекций")
    parser.add_argument(
        "--resolve-refs", action="store_true", help="Разрешить $ref перед генерацией"
    )
    parser.add_argument(
        "--base-url-env",
        type=str,
        help="Переменная окружения с базовым URL для core.ts (например VITE_API_BASE_URL)",
    )
    parser.add_argument(
        "--init-config", action="store_true", help=f"Создать конфиг файл {CONFIG_FILE_NAME}"
    )
    parser.add_argument("--verbose", action="store_true", help="Подробный лог")
    return parser


def load_config(args: argparse.Namespace) -> OpenApiConfig:
    """Конфиг из openapi.toml в корне проекта, дополненный аргументами"""
    file_config = OpenApiConfig.from_file(search_dir=args.root)
    if file_config:
        logger.info("Используется конфиг из %s", os.path.join(args.root, CONFIG_FILE_NAME))
        return file_config.merge_with_args(args)
    return OpenApiConfig().merge_with_args(args)


def generate(argv: Optional[List[str]] = None) -> int:
    """Команда генерации клиентов"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)

        if args.init_config:
            config_path = os.path.join(args.root, CONFIG_FILE_NAME)
            config.save_to_file(config_path)
            print(f"✅ Создан конфиг файл {config_path}")
            return 0

        result = run(config, root=args.root)
    except Exception as e:
        print("Failed to generate API clients.", file=sys.stderr)
        print(f"❌ Ошибка генерации: {e}", file=sys.stderr)
        logger.debug("Трассировка ошибки", exc_info=True)
        sys.exit(1)

    print(result.summary())
    return 0


if __name__ == "__main__":
    generate()
