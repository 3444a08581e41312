"""Ошибки приложения.

Каждая ошибка знает свой HTTP статус и безопасное для клиента сообщение.
Внутренние детали (трейсбеки, идентификаторы) в ответ не попадают.
"""
from typing import TYPE_CHECKING, Dict, List, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from matty.core.responses import error_response

if TYPE_CHECKING:
    from matty.core.validation import FieldError


class InvalidToken(Exception):
    """Токен не прошел проверку: подпись, формат или срок действия"""


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self) -> JSONResponse:
        return error_response(self.message, self.status_code, headers=self.headers)


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authorized"
    headers = {"WWW-Authenticate": "Bearer"}


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class ValidationFailed(BadRequest):
    message = "Validation failed"

    def __init__(self, errors: List["FieldError"]):
        super().__init__()
        self.errors = list(errors)

    def to_response(self) -> JSONResponse:
        return error_response(
            self.message,
            self.status_code,
            errors=[error.to_dict() for error in self.errors],
        )


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InternalFailure(AppError):
    pass


class PayloadTooLarge(AppError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    message = "Payload too large"
