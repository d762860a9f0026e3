from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make the quizbank package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from quizbank.core import config as core_config  # noqa: E402

ENV_VARS = (
    "APP_ENV",
    "HOST",
    "PORT",
    "QUESTION_STORE",
    "DATA_FILE",
    "DATABASE_URL",
    "SQL_ECHO",
    "STATIC_DIR",
    "LOG_LEVEL",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(clean_env):
    settings = core_config.get_settings()
    assert settings.port == 3000
    assert settings.question_store == "file"
    assert settings.data_file == str(Path("data") / "questions.json")
    assert settings.database_url.startswith("sqlite:///")
    assert settings.static_dir == ""
    assert settings.sql_echo is False


def test_env_overrides(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("QUESTION_STORE", " SQL ")
    clean_env.setenv("DATABASE_URL", "postgresql+psycopg2://quiz:quiz@db/quiz")
    clean_env.setenv("SQL_ECHO", "yes")
    settings = core_config.get_settings()
    assert settings.port == 8080
    assert settings.question_store == "sql"
    assert settings.database_url == "postgresql+psycopg2://quiz:quiz@db/quiz"
    assert settings.sql_echo is True


def test_invalid_port_falls_back_to_default(clean_env):
    clean_env.setenv("PORT", "not-a-port")
    assert core_config.get_settings().port == 3000
