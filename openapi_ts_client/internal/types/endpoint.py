from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

SchemaSummary = Dict[str, Any]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Reference(_Frozen):
    """Неразрешенная ссылка ``$ref`` (параметр или тело запроса)"""

    ref: str


class Parameter(_Frozen):
    name: Optional[str] = None
    location: Optional[str] = None  # path / query / header / cookie
    required: bool = False
    description: Optional[str] = None
    schema_summary: Optional[SchemaSummary] = None
    deprecated: bool = False
    allow_empty_value: bool = False
    style: Optional[str] = None
    explode: Optional[bool] = None


class ContentEntry(_Frozen):
    mime_type: str
    schema_summary: Optional[SchemaSummary] = None
    example: Any = None
    examples: Any = None


class RequestBody(_Frozen):
    description: Optional[str] = None
    required: bool = False
    content: Optional[List[ContentEntry]] = None


class Header(_Frozen):
    name: str
    ref: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    deprecated: bool = False
    schema_summary: Optional[SchemaSummary] = None


class Response(_Frozen):
    """Ответ эндпоинта; при ``ref`` остальные поля пустые"""

    status: str
    ref: Optional[str] = None
    description: Optional[str] = None
    headers: Optional[List[Header]] = None
    content: Optional[List[ContentEntry]] = None


class Endpoint(_Frozen):
    """Нормализованное представление одной операции OpenAPI"""

    id: str
    name: str
    method: str
    path: str
    operation_id: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    parameters: List[Union[Reference, Parameter]] = []
    request_body: Optional[Union[Reference, RequestBody]] = None
    responses: List[Response] = []
    deprecated: bool = False
    security: List[Any] = []

    def parameter_names(self, location: str) -> List[str]:
        """Имена параметров в указанном расположении (ссылки пропускаются)"""
        return [
            param.name
            for param in self.parameters
            if isinstance(param, Parameter) and param.location == location and param.name
        ]

    def query_parameters(self) -> List[Parameter]:
        return [
            param
            for param in self.parameters
            if isinstance(param, Parameter) and param.location == "query"
        ]


# Тег -> эндпоинты в порядке добавления тегов
TagGroups = Dict[str, List[Endpoint]]
