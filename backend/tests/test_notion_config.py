# backend/tests/test_notion_config.py

import pytest

from content_grid.notion.config import (
    DATABASE_ID_ENV_NAMES,
    TOKEN_ENV_NAMES,
    NotionConfigError,
    get_notion_config,
)


@pytest.fixture(autouse=True)
def _clear_notion_env(monkeypatch):
    for name in TOKEN_ENV_NAMES + DATABASE_ID_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("NOTION_API_BASE_URL", raising=False)
    monkeypatch.delenv("NOTION_TIMEOUT_SECONDS", raising=False)


def test_get_notion_config_reads_primary_names(monkeypatch):
    monkeypatch.setenv("NOTION_TOKEN", "secret")
    monkeypatch.setenv("NOTION_DATABASE_ID", "db-1")

    config = get_notion_config()

    assert config.api_key == "secret"
    assert config.database_id == "db-1"
    assert config.api_base_url == "https://api.notion.com/v1"
    assert config.timeout_seconds == 10


def test_get_notion_config_falls_back_to_legacy_names(monkeypatch):
    monkeypatch.setenv("NOTION_API_KEY", "legacy-secret")
    monkeypatch.setenv("NOTION_CONTENT_DB_ID", "legacy-db")

    config = get_notion_config()

    assert config.api_key == "legacy-secret"
    assert config.database_id == "legacy-db"


def test_get_notion_config_skips_empty_values(monkeypatch):
    monkeypatch.setenv("NOTION_TOKEN", "")
    monkeypatch.setenv("NOTION_SECRET", "from-secret")
    monkeypatch.setenv("NOTION_DB_ID", "db-2")

    config = get_notion_config()

    assert config.api_key == "from-secret"
    assert config.database_id == "db-2"


def test_get_notion_config_missing_database_id(monkeypatch):
    monkeypatch.setenv("NOTION_TOKEN", "secret")

    with pytest.raises(NotionConfigError):
        get_notion_config()


def test_get_notion_config_invalid_timeout_uses_default(monkeypatch):
    monkeypatch.setenv("NOTION_TOKEN", "secret")
    monkeypatch.setenv("NOTION_DATABASE_ID", "db-1")
    monkeypatch.setenv("NOTION_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("NOTION_API_BASE_URL", "http://localhost:9000/v1/")

    config = get_notion_config()

    assert config.timeout_seconds == 10
    assert config.api_base_url == "http://localhost:9000/v1"
