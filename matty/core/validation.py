"""Преобразование ошибок pydantic в список ``{field, message}``.

Схемы запросов объявляют ``error_messages``: сообщение для каждого поля.
Ошибки из собственных валидаторов (``InvalidField``) несут свое сообщение.
"""
from dataclasses import dataclass
from typing import Dict, List, Type

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

INVALID_FIELD = "invalid_field"


def InvalidField(message: str) -> PydanticCustomError:
    """Ошибка валидатора с готовым сообщением для клиента"""
    return PydanticCustomError(INVALID_FIELD, message)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


def field_errors(exc: ValidationError, schema: Type[BaseModel]) -> List[FieldError]:
    """Ошибки в порядке полей схемы, по одной на поле"""
    messages: Dict[str, str] = getattr(schema, "error_messages", {})
    errors: List[FieldError] = []
    seen = set()

    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        if field in seen:
            continue
        seen.add(field)

        if error["type"] == INVALID_FIELD:
            message = error["msg"]
        else:
            message = messages.get(field, error["msg"])
        errors.append(FieldError(field, message))

    return errors
