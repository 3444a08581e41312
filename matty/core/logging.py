import logging
import time

from starlette.requests import Request

logger = logging.getLogger("matty.http")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("matty").setLevel(level.upper())


async def log_requests(request: Request, call_next):
    """HTTP middleware: метод, путь, статус и время ответа"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response
