import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from matty.api.http import auth_router, designs_router, health_router
from matty.core.config import Settings, get_settings
from matty.core.db import create_engine, create_session_factory, init_models
from matty.core.exceptions import AppError, InternalFailure
from matty.core.logging import configure_logging, log_requests
from matty.core.responses import error_response

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_engine(app.state.settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    await init_models(engine)
    logger.info("Database ready")
    try:
        yield
    finally:
        await engine.dispose()


async def app_error_handler(request: Request, exc: AppError):
    return exc.to_response()


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception):
    # Детали только в лог, клиенту - общее сообщение
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return InternalFailure().to_response()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Matty API",
        description="Design documents API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(designs_router)

    return app


def run() -> None:
    import uvicorn

    uvicorn.run("matty.main:create_app", factory=True, host="0.0.0.0", port=5001)


if __name__ == "__main__":
    run()
