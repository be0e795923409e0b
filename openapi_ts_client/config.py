"""
Конфигурация генератора
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

import toml

CONFIG_FILE_NAME = "openapi.toml"


class ConfigError(ValueError):
    """Файл конфигурации поврежден"""


@dataclass
class OpenApiConfig:
    """Конфигурация генератора TypeScript клиента"""

    spec: str = "swagger.json"
    client_dir: str = os.path.join("app", "api", "generated")
    postman_dir: str = "postman-collections"
    resolve_refs: bool = False
    base_url_env: Optional[str] = None

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: str = None
    ) -> Optional["OpenApiConfig"]:
        """Загрузка конфигурации из файла; None если файла нет"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_path = os.path.join(search_dir, CONFIG_FILE_NAME)

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"Некорректный файл {config_path}: {e}") from e

        defaults = cls()
        return cls(
            spec=config_data.get("spec", defaults.spec),
            client_dir=config_data.get("client_dir", defaults.client_dir),
            postman_dir=config_data.get("postman_dir", defaults.postman_dir),
            resolve_refs=bool(config_data.get("resolve_refs", defaults.resolve_refs)),
            base_url_env=config_data.get("base_url_env") or None,
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "spec": self.spec,
            "client_dir": self.client_dir,
            "postman_dir": self.postman_dir,
            "resolve_refs": self.resolve_refs,
        }
        # toml не умеет записывать None
        if self.base_url_env:
            config_data["base_url_env"] = self.base_url_env

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "OpenApiConfig":
        """Объединение с аргументами командной строки (аргументы приоритетнее)"""
        values = {}
        for field in fields(self):
            value = getattr(args, field.name, None)
            values[field.name] = getattr(self, field.name) if value in (None, False) else value
        return OpenApiConfig(**values)
