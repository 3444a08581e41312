"""Конвейер обработки запроса.

Запрос проходит упорядоченную последовательность стадий. Каждая стадия
возвращает ``StageResult``: либо продолжить с обогащенным контекстом,
либо прервать конвейер готовой ошибкой. Обработчик вызывается только
если все стадии пропустили запрос.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Request
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from matty.core.exceptions import AppError


@dataclass
class RequestContext:
    request: Request
    session: AsyncSession
    params: Dict[str, str] = field(default_factory=dict)
    identity: Optional[uuid.UUID] = None
    body: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StageResult:
    context: Optional[RequestContext] = None
    error: Optional[AppError] = None

    @classmethod
    def proceed(cls, context: RequestContext) -> "StageResult":
        return cls(context=context)

    @classmethod
    def reject(cls, error: AppError) -> "StageResult":
        return cls(error=error)

    @property
    def rejected(self) -> bool:
        return self.error is not None


Stage = Callable[[RequestContext], Awaitable[StageResult]]
Handler = Callable[[RequestContext], Awaitable[Response]]


class Pipeline:
    def __init__(self, *stages: Stage):
        self.stages = tuple(stages)

    def then(self, *stages: Stage) -> "Pipeline":
        """Новый конвейер с дополнительными стадиями в конце"""
        return Pipeline(*self.stages, *stages)

    async def run(self, context: RequestContext, handler: Handler) -> Response:
        for stage in self.stages:
            result = await stage(context)
            if result.rejected:
                return result.error.to_response()
            context = result.context
        return await handler(context)
