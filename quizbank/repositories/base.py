"""Collection store contract shared by the file and SQL backends.

Backends implement two blocking primitives, ``read_all`` and ``write_all``,
and raise ``StoreError`` subclasses on failure. The async ``load`` and
``replace_all`` wrappers run them on the threadpool and apply the policy:

* ``load`` never raises; any StoreError is logged and yields ``[]``.
* ``replace_all`` logs and re-raises, so the caller can report failure.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any

from starlette.concurrency import run_in_threadpool

from quizbank.domain.questions import Collection, is_collection

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for collection store failures."""


class StorageUnavailableError(StoreError):
    """Raised when the file or database cannot be reached."""


class MalformedContentError(StoreError):
    """Raised when stored content is not a JSON array."""


class WriteFailedError(StoreError):
    """Raised when a write or transaction fails; nothing was committed."""


class InvalidCollectionError(StoreError):
    """Raised when a replace candidate is not a JSON array."""


@dataclass(frozen=True)
class SaveResult:
    count: int
    backend: str
    target: str


class QuestionStore(ABC):
    """Durable storage of one ordered collection of questions."""

    backend = "abstract"

    def open(self) -> None:
        """Acquire resources. Must not fail when storage is unreachable."""

    def close(self) -> None:
        """Release resources (best effort)."""

    @property
    @abstractmethod
    def target(self) -> str:
        """Human readable location used in log records."""

    @abstractmethod
    def read_all(self) -> Collection:
        ...

    @abstractmethod
    def write_all(self, questions: Collection) -> int:
        ...

    async def load(self) -> Collection:
        try:
            return await run_in_threadpool(self.read_all)
        except StoreError as exc:
            logger.warning(
                "load from %s backend (%s) failed, returning empty collection: %s",
                self.backend,
                self.target,
                exc,
            )
            return []

    async def replace_all(self, candidate: Any) -> SaveResult:
        if not is_collection(candidate):
            logger.error(
                "replace_all on %s backend rejected a %s payload", self.backend, type(candidate).__name__
            )
            raise InvalidCollectionError("Collection must be a JSON array")
        try:
            count = await run_in_threadpool(self.write_all, candidate)
        except StoreError:
            logger.exception("replace_all on %s backend (%s) failed", self.backend, self.target)
            raise
        logger.info("Saved %d questions to %s (%s backend)", count, self.target, self.backend)
        return SaveResult(count=count, backend=self.backend, target=self.target)
