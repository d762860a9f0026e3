"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from quizbank.domain import questions as qjson

Base = declarative_base()
logger = logging.getLogger(__name__)


def create_db_engine(url: str, *, echo: bool = False) -> Engine:
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    connect_args = {}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        # sessions run on threadpool workers
        connect_args["check_same_thread"] = False
        database = parsed.database or ""
        if database and database != ":memory:" and not database.startswith("file:"):
            try:
                Path(database).parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.warning("Cannot create directory for SQLite database %s: %s", database, exc)
    return create_engine(
        url,
        future=True,
        pool_pre_ping=True,
        echo=echo,
        connect_args=connect_args,
        json_serializer=qjson.dumps,
        json_deserializer=qjson.loads,
    )


def make_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
