"""Build the configured question store."""
from __future__ import annotations

from quizbank.core.config import FILE_BACKEND, SQL_BACKEND, BACKENDS, Settings
from quizbank.repositories.base import QuestionStore
from quizbank.repositories.json_storage import JSONQuestionStore
from quizbank.repositories.sql_repository import SQLQuestionStore


def build_store(settings: Settings) -> QuestionStore:
    backend = settings.question_store
    if backend == FILE_BACKEND:
        return JSONQuestionStore(settings.data_file)
    if backend == SQL_BACKEND:
        return SQLQuestionStore(settings.database_url, echo=settings.sql_echo)
    raise ValueError(f"Unknown QUESTION_STORE {backend!r}; expected one of {', '.join(BACKENDS)}")
