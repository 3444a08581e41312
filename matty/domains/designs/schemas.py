from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Any, ClassVar, Dict, Optional

from matty.core.validation import InvalidField

TITLE_MAX_LENGTH = 100


class DesignBase(BaseModel):
    """Базовая схема дизайна"""
    error_messages: ClassVar[Dict[str, str]] = {
        "title": "Title required",
        "canvasData": "Canvas data must be an object",
        "thumbnail": "Thumbnail must be a string",
    }

    @field_validator('title', mode='before', check_fields=False)
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v


class DesignCreate(DesignBase):
    """Схема для создания дизайна"""
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    # Состояние холста: любой JSON объект, содержимое не проверяется
    canvas_data: Dict[str, Any] = Field(..., alias="canvasData")
    thumbnail: str = ""


class DesignUpdate(DesignBase):
    """Схема для обновления дизайна: все поля необязательны"""
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    canvas_data: Optional[Dict[str, Any]] = Field(None, alias="canvasData")
    thumbnail: Optional[str] = None

    @field_validator('title', 'canvas_data', 'thumbnail', mode='before')
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        # Переданный null - ошибка, а не очистка поля
        if v is None:
            alias = cls.model_fields[info.field_name].alias or info.field_name
            raise InvalidField(cls.error_messages[alias])
        return v
