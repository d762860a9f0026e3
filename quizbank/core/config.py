"""
Configuration helpers for the quizbank backend.

Settings are read once from the process environment; call
``get_settings.cache_clear()`` after changing env vars (tests do this).
"""

from dataclasses import dataclass
from functools import lru_cache
import os

FILE_BACKEND = "file"
SQL_BACKEND = "sql"
BACKENDS = (FILE_BACKEND, SQL_BACKEND)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    question_store: str
    data_file: str
    database_url: str
    sql_echo: bool
    static_dir: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        question_store=(os.getenv("QUESTION_STORE") or FILE_BACKEND).strip().lower(),
        data_file=os.getenv("DATA_FILE") or os.path.join("data", "questions.json"),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///data/questions.db").strip(),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
        static_dir=(os.getenv("STATIC_DIR") or "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
