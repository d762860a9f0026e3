"""One-off migration script: questions.json -> SQL question table."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# make the quizbank package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from quizbank.core.config import get_settings
from quizbank.repositories.base import MalformedContentError, StorageUnavailableError
from quizbank.repositories.json_storage import JSONQuestionStore
from quizbank.repositories.sql_repository import SQLQuestionStore


def migrate(data_file: str, database_url: str) -> int:
    """Copy the file collection into the table in one replace. Returns the row count."""
    path = Path(data_file)
    if not path.exists():
        raise SystemExit(f"Data file not found: {path}")
    source = JSONQuestionStore(path)
    try:
        questions = source.read_all()
    except (MalformedContentError, StorageUnavailableError) as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc

    target = SQLQuestionStore(database_url)
    target.open()
    try:
        return target.write_all(questions)
    finally:
        target.close()


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Copy questions from the JSON data file into the SQL table.")
    parser.add_argument("--data-file", default=settings.data_file, help="source JSON file (default: DATA_FILE)")
    parser.add_argument("--database-url", default=settings.database_url, help="target database (default: DATABASE_URL)")
    args = parser.parse_args(argv)
    count = migrate(args.data_file, args.database_url)
    print(f"Migrated {count} questions to {args.database_url}.")


if __name__ == "__main__":
    main()
