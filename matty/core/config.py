from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Без DATABASE_URL работаем на локальном SQLite (режим разработки)
    database_url: str = "sqlite+aiosqlite:///./matty.db"
    sql_echo: bool = False

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Предел размера тела запроса
    max_body_bytes: int = 10 * 1024 * 1024

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Настройки процесса (читаются один раз)"""
    return Settings()
