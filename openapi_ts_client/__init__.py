"""Генератор TypeScript клиентов и Postman коллекций из OpenAPI спецификаций"""

from .generator import ApiClientGenerator, GenerationResult, run

__all__ = ["ApiClientGenerator", "GenerationResult", "run"]
