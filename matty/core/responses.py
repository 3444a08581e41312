from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Успешный ответ с данными"""
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def message_response(message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Успешный ответ без данных"""
    return JSONResponse(status_code=status_code, content={"success": True, "message": message})


def error_response(
    message: str,
    status_code: int,
    errors: Optional[List[Dict[str, str]]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Ответ с ошибкой: сообщение и, для валидации, список полей"""
    content: Dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)
