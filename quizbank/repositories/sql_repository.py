"""Question collection backed by a SQLAlchemy table."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, InterfaceError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from quizbank.db.models import QuestionRow
from quizbank.db.session import Base, create_db_engine, make_sessionmaker
from quizbank.domain.questions import Collection
from quizbank.repositories.base import (
    MalformedContentError,
    QuestionStore,
    StorageUnavailableError,
    WriteFailedError,
)

logger = logging.getLogger(__name__)


def _is_disconnect(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, InterfaceError):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class SQLQuestionStore(QuestionStore):
    """
    Table backend. Each operation checks a session out of the engine pool
    and returns it when done, whatever the outcome.

    ``replace_all`` deletes every row and inserts the new ones in a single
    transaction, so a concurrent load sees either the old or the new set.
    """

    backend = "sql"

    def __init__(self, url: str, *, echo: bool = False, engine: Optional[Engine] = None) -> None:
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = engine
        self._owns_engine = engine is None
        self._sessionmaker: Optional[sessionmaker] = None
        self._schema_ready = False

    @property
    def target(self) -> str:
        engine = self._engine
        if engine is not None:
            return engine.url.render_as_string(hide_password=True)
        return "<unopened engine>"

    # -------------------------- lifecycle --------------------------
    def open(self) -> None:
        if self._engine is None:
            self._engine = create_db_engine(self.url, echo=self.echo)
        self._sessionmaker = make_sessionmaker(self._engine)
        try:
            self._ensure_schema()
        except StorageUnavailableError as exc:
            logger.warning("Question table not ready at startup, will retry on first use: %s", exc)

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            if self._owns_engine:
                self._engine = None
        self._sessionmaker = None
        self._schema_ready = False

    def _session(self) -> Session:
        if self._sessionmaker is None:
            raise StorageUnavailableError("SQL store is not open")
        return self._sessionmaker()

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        if self._engine is None:
            raise StorageUnavailableError("SQL store is not open")
        try:
            Base.metadata.create_all(bind=self._engine, tables=[QuestionRow.__table__])
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"cannot create question table: {exc}") from exc
        self._schema_ready = True

    # -------------------------- reads --------------------------
    def read_all(self) -> Collection:
        stmt = select(QuestionRow.data).order_by(QuestionRow.position, QuestionRow.id)
        try:
            self._ensure_schema()
            with self._session() as session:
                return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"cannot read questions: {exc}") from exc
        except ValueError as exc:
            raise MalformedContentError(f"stored question is not valid JSON: {exc}") from exc

    # -------------------------- writes --------------------------
    def write_all(self, questions: Collection) -> int:
        self._ensure_schema()
        try:
            session = self._session()
            with session, session.begin():
                self._clear(session)
                self._insert_rows(session, questions)
        except SQLAlchemyError as exc:
            if _is_disconnect(exc):
                raise StorageUnavailableError(f"database unreachable: {exc}") from exc
            raise WriteFailedError(f"transaction rolled back: {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise WriteFailedError(f"transaction rolled back: {exc}") from exc
        return len(questions)

    def _clear(self, session: Session) -> None:
        table = QuestionRow.__tablename__
        dialect = session.get_bind().dialect.name
        if dialect == "postgresql":
            session.execute(text(f"TRUNCATE TABLE {table} RESTART IDENTITY"))
            return
        session.execute(delete(QuestionRow))
        if dialect == "sqlite":
            # only present when the table was created with AUTOINCREMENT
            has_sequence = session.execute(
                text("SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'sqlite_sequence'")
            ).first()
            if has_sequence:
                session.execute(text("DELETE FROM sqlite_sequence WHERE name = :name"), {"name": table})

    def _insert_rows(self, session: Session, questions: Collection) -> None:
        if not questions:
            return
        rows = [{"position": index, "data": question} for index, question in enumerate(questions)]
        session.execute(insert(QuestionRow.__table__), rows)
