# backend/tests/test_grid_router.py

import httpx
from fastapi.testclient import TestClient

from content_grid.grid.router import get_grid_service
from content_grid.grid.service import GridService
from content_grid.main import create_app
from content_grid.notion.client import NotionAPIError, NotionResponseError
from content_grid.notion.config import (
    DATABASE_ID_ENV_NAMES,
    TOKEN_ENV_NAMES,
    NotionConfig,
    NotionConfigError,
)


class _StubService:
    def __init__(self, result=None, error=None):
        self._result = result
        self._error = error

    def fetch_grid(self):
        if self._error is not None:
            raise self._error
        return self._result


class _StubClient:
    config = NotionConfig(api_key="dummy-key", database_id="db-123")

    def retrieve_database(self):
        return {"properties": {"Hide": {}}}

    def query_database(self, payload):
        return {
            "results": [
                {
                    "id": "page-1",
                    "created_time": "2024-01-01T00:00:00.000Z",
                    "url": "https://www.notion.so/page-1",
                    "properties": {
                        "Name": {"title": [{"plain_text": "Hello"}]},
                        "Publish Date": {"date": {"start": "2024-02-01"}},
                        "Owner": {"people": [{"name": "Ana"}]},
                        "Link": {"url": "https://cdn.example/clip.mp4"},
                    },
                }
            ],
            "has_more": False,
            "next_cursor": None,
        }


def create_test_client(service) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_grid_service] = lambda: service
    return TestClient(app)


def test_grid_success():
    client = create_test_client(GridService(client=_StubClient()))

    resp = client.get("/api/grid")

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["dbId"] == "db-123"
    assert body["hasMore"] is False
    assert body["nextCursor"] is None
    item = body["items"][0]
    assert item["title"] == "Hello"
    assert item["publishDate"] == "2024-02-01"
    assert item["status"] == "Draft"
    assert item["isVideo"] is True
    assert item["assets"] == [{"url": "https://cdn.example/clip.mp4", "type": "video", "source": "link"}]
    assert body["filters"]["owners"][0]["name"] == "Ana"
    assert len(body["filters"]["platforms"]) == 6


def test_grid_missing_config_returns_400():
    client = create_test_client(
        _StubService(error=NotionConfigError("Missing NOTION_TOKEN or NOTION_DATABASE_ID env vars."))
    )

    resp = client.get("/api/grid")

    assert resp.status_code == 400
    assert resp.json() == {"ok": False, "error": "Missing NOTION_TOKEN or NOTION_DATABASE_ID env vars."}


def test_grid_invalid_response_returns_500():
    client = create_test_client(_StubService(error=NotionResponseError("Invalid Notion response")))

    resp = client.get("/api/grid")

    assert resp.status_code == 500
    assert resp.json() == {"ok": False, "error": "Invalid Notion response"}


def test_grid_upstream_error_returns_message():
    client = create_test_client(_StubService(error=NotionAPIError("API token is invalid.", status_code=401)))

    resp = client.get("/api/grid")

    assert resp.status_code == 500
    assert resp.json()["error"] == "API token is invalid."


def test_grid_unexpected_error_returns_generic_message():
    client = create_test_client(_StubService(error=ValueError("boom")))

    resp = client.get("/api/grid")

    assert resp.status_code == 500
    assert resp.json() == {"ok": False, "error": "Notion query failed"}


def test_grid_missing_config_does_not_call_notion(monkeypatch):
    for name in TOKEN_ENV_NAMES + DATABASE_ID_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    calls = []

    def record_call(url, **kwargs):
        calls.append(url)
        raise AssertionError("Notion must not be called without config")

    monkeypatch.setattr(httpx, "get", record_call)
    monkeypatch.setattr(httpx, "post", record_call)

    resp = TestClient(create_app()).get("/api/grid")

    assert resp.status_code == 400
    assert resp.json()["ok"] is False
    assert calls == []
