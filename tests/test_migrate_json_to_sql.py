from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import pytest

# make the quizbank package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from quizbank.repositories.sql_repository import SQLQuestionStore  # noqa: E402
from scripts.migrate_json_to_sql import migrate  # noqa: E402


def test_migrate_copies_collection_in_order(tmp_path):
    questions = [{"q": "one"}, {"q": "two", "tags": ["x"]}, "three"]
    data_file = tmp_path / "questions.json"
    data_file.write_text(json.dumps(questions, indent=4), encoding="utf-8")
    url = f"sqlite:///{tmp_path / 'migrated.db'}"

    assert migrate(str(data_file), url) == 3

    store = SQLQuestionStore(url)
    store.open()
    try:
        assert asyncio.run(store.load()) == questions
    finally:
        store.close()


def test_migrate_requires_existing_file(tmp_path):
    with pytest.raises(SystemExit):
        migrate(str(tmp_path / "missing.json"), f"sqlite:///{tmp_path / 'x.db'}")


def test_migrate_rejects_corrupt_file(tmp_path):
    data_file = tmp_path / "questions.json"
    data_file.write_text("{broken", encoding="utf-8")
    with pytest.raises(SystemExit):
        migrate(str(data_file), f"sqlite:///{tmp_path / 'x.db'}")
