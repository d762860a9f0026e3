"""
JSON file persistence adapter.

The whole collection lives in one UTF-8 file, pretty printed with 4-space
indentation. Writes go to a temp file next to the target which is then
renamed over it, so readers see either the old or the new array.
"""

from __future__ import annotations

from pathlib import Path
import logging
import os
import tempfile
import threading

from quizbank.domain import questions as qjson
from quizbank.domain.questions import Collection, is_collection
from quizbank.repositories.base import (
    MalformedContentError,
    QuestionStore,
    StorageUnavailableError,
    WriteFailedError,
)

logger = logging.getLogger(__name__)


def dumps(questions: Collection) -> str:
    return qjson.dumps(questions, ensure_ascii=False, indent=4)


class JSONQuestionStore(QuestionStore):
    """File backend. Writers inside this process are serialized by a lock."""

    backend = "file"

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._write_lock = threading.Lock()

    @property
    def target(self) -> str:
        return str(self.path)

    def read_all(self) -> Collection:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No data file at %s yet, starting with an empty collection", self.path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageUnavailableError(f"cannot read {self.path}: {exc}") from exc
        try:
            data = qjson.loads(raw)
        except ValueError as exc:
            raise MalformedContentError(f"{self.path} is not valid JSON: {exc}") from exc
        if not is_collection(data):
            raise MalformedContentError(f"{self.path} holds a {type(data).__name__}, expected an array")
        return data

    def write_all(self, questions: Collection) -> int:
        try:
            payload = dumps(questions)
        except (TypeError, ValueError) as exc:
            raise WriteFailedError(f"collection is not JSON serializable: {exc}") from exc
        with self._write_lock:
            self._replace_file(payload)
        return len(questions)

    def _replace_file(self, payload: str) -> None:
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise WriteFailedError(f"cannot write {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_name)
