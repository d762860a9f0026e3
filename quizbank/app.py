"""FastAPI application factory for the quizbank service."""
from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from quizbank.core.config import Settings, get_settings
from quizbank.repositories.base import QuestionStore
from quizbank.repositories.factory import build_store
from quizbank.routers import questions as questions_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[QuestionStore] = None) -> FastAPI:
    """
    Build the app around an explicit question store.

    The store is opened when the app starts and closed when it stops. When
    ``store`` is omitted it is built from ``settings`` (or the environment).
    """
    settings = settings or get_settings()
    store = store if store is not None else build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        logger.info("Question store ready: %s backend at %s", store.backend, store.target)
        try:
            yield
        finally:
            store.close()
            logger.info("Question store closed")

    app = FastAPI(title="Quiz Question Store", lifespan=lifespan)
    app.state.settings = settings
    app.state.question_store = store
    app.include_router(questions_router.router)

    # mounted last so the API routes take precedence
    static_dir = settings.static_dir
    if static_dir:
        if os.path.isdir(static_dir):
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("STATIC_DIR %s does not exist; editor UI will not be served", static_dir)
    return app
