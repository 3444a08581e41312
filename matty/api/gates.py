"""Стадии конвейера: аутентификация, разбор тела и валидация."""
import json
import logging
import math
from typing import Type

from pydantic import BaseModel, ValidationError

from matty.core.exceptions import (
    BadRequest, InvalidToken, PayloadTooLarge, Unauthorized, ValidationFailed
)
from matty.core.pipeline import RequestContext, Stage, StageResult
from matty.core.security import decode_access_token, extract_token_from_header
from matty.core.validation import field_errors

logger = logging.getLogger(__name__)


async def authenticate(context: RequestContext) -> StageResult:
    """Bearer токен -> идентификатор владельца в контексте"""
    token = extract_token_from_header(context.request.headers.get("Authorization"))

    if token is None:
        return StageResult.reject(Unauthorized("Not authorized"))

    settings = context.request.app.state.settings
    try:
        context.identity = decode_access_token(token, settings)
    except InvalidToken as e:
        # Причина только в лог, клиент видит одно общее сообщение
        logger.info(f"Rejected token on {context.request.url.path}: {e}")
        return StageResult.reject(Unauthorized("Invalid token"))

    return StageResult.proceed(context)


def _reject_constant(name: str):
    raise ValueError(f"Unsupported JSON constant {name}")


def _finite_float(value: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Number out of range: {value}")
    return number


async def parse_body(context: RequestContext) -> StageResult:
    """Разбор JSON тела; пустое тело - пустой объект"""
    request = context.request
    limit = request.app.state.settings.max_body_bytes

    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        return StageResult.reject(PayloadTooLarge())

    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            return StageResult.reject(PayloadTooLarge())
        chunks.append(chunk)
    raw = b"".join(chunks)

    if not raw.strip():
        context.body = {}
        return StageResult.proceed(context)

    # NaN/Infinity не являются JSON и не могут быть отданы обратно в ответе
    try:
        body = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError:
        return StageResult.reject(BadRequest("Invalid JSON body"))

    if not isinstance(body, dict):
        return StageResult.reject(BadRequest("Invalid JSON body"))

    context.body = body
    return StageResult.proceed(context)


def validate(schema: Type[BaseModel], partial: bool = False) -> Stage:
    """Стадия валидации тела по pydantic схеме.

    В режиме ``partial`` дальше передаются только присланные поля.
    """

    async def stage(context: RequestContext) -> StageResult:
        try:
            data = schema.model_validate(context.body)
        except ValidationError as e:
            errors = field_errors(e, schema)
            logger.debug(f"Validation failed on {context.request.url.path}: {errors}")
            return StageResult.reject(ValidationFailed(errors))

        context.body = data.model_dump(exclude_unset=partial)
        return StageResult.proceed(context)

    return stage
