"""Сортировка строк по Unicode Collation Algorithm"""

from functools import lru_cache

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Таблица DUCET загружается один раз
    return Collator()


def collation_key(value: str):
    """
    Ключ сортировки, близкий к ``localeCompare``.

    Акцентированные и кириллические буквы стоят рядом с базовыми, при
    равенстве без учета регистра строчная буква идет раньше заглавной.
    Исходная строка в конце ключа делает порядок полным.

    Examples:
        >>> sorted(["Fig", "Éclair", "Жук", "Ёлка"], key=collation_key)
        ['Éclair', 'Fig', 'Ёлка', 'Жук']
    """
    return _collator().sort_key(value), value
