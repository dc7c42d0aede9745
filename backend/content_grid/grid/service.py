# backend/content_grid/grid/service.py

"""
NotionClient と正規化・集計ロジックをつなぐサービス層。

- データベースのスキーマを見て query 条件を組み立てる
- 1 ページ分（最大 100 件）を取得し Post に変換する
- フィルタ候補を集計して GridResponse を返す
"""

import logging
from typing import Any, Dict, List, Optional

from content_grid.notion.client import MAX_PAGE_SIZE, NotionClient, NotionResponseError
from content_grid.notion.config import NotionConfig, get_notion_config

from .filters import build_filters
from .normalizer import normalize_post
from .schemas import GridResponse, Post

logger = logging.getLogger(__name__)

HIDE_PROPERTY = "Hide"
PINNED_PROPERTY = "Pinned"
PUBLISH_DATE_PROPERTY = "Publish Date"


def build_query(
    *,
    has_hide: bool = True,
    has_pinned: bool = True,
    has_publish_date: bool = True,
    page_size: int = MAX_PAGE_SIZE,
) -> Dict[str, Any]:
    """
    databases.query のリクエストボディを組み立てる。

    存在しないプロパティを filter / sorts に指定すると Notion が 400 を返すので、
    スキーマに存在するものだけを使う。作成日時の降順は常に最後のタイブレーク。
    """
    sorts: List[Dict[str, str]] = []
    if has_pinned:
        sorts.append({"property": PINNED_PROPERTY, "direction": "descending"})
    if has_publish_date:
        sorts.append({"property": PUBLISH_DATE_PROPERTY, "direction": "descending"})
    sorts.append({"timestamp": "created_time", "direction": "descending"})

    payload: Dict[str, Any] = {
        "page_size": min(page_size, MAX_PAGE_SIZE),
        "sorts": sorts,
    }
    if has_hide:
        payload["filter"] = {
            "property": HIDE_PROPERTY,
            "checkbox": {"equals": False},
        }
    return payload


class GridService:
    """
    /api/grid のためのサービス。

    - client / config はテスト時に差し替え可能
    - detect_schema=False の場合はスキーマ取得を省略し、
      Hide / Pinned / Publish Date が存在する前提で query する
    """

    def __init__(
        self,
        client: Optional[NotionClient] = None,
        config: Optional[NotionConfig] = None,
        *,
        detect_schema: bool = True,
    ) -> None:
        self._client = client
        self._config = config
        self._detect_schema = detect_schema

    def _resolve_config(self) -> NotionConfig:
        if self._config is not None:
            return self._config
        if self._client is not None:
            return self._client.config
        return get_notion_config()

    def _build_payload(self, client: NotionClient) -> Dict[str, Any]:
        if not self._detect_schema:
            return build_query()

        database = client.retrieve_database()
        properties = database.get("properties")
        if not isinstance(properties, dict):
            properties = {}

        return build_query(
            has_hide=HIDE_PROPERTY in properties,
            has_pinned=PINNED_PROPERTY in properties,
            has_publish_date=PUBLISH_DATE_PROPERTY in properties,
        )

    def fetch_grid(self) -> GridResponse:
        """
        Notion から投稿を取得し、正規化済みの一覧とフィルタ候補を返す。

        :raises NotionConfigError: トークン / DB ID が未設定の場合（Notion は呼ばない）
        :raises NotionResponseError: results が配列でない場合
        :raises NotionClientError: Notion 呼び出しに失敗した場合
        """
        config = self._resolve_config()
        client = self._client or NotionClient(config=config)

        payload = self._build_payload(client)
        data = client.query_database(payload)

        results = data.get("results")
        if not isinstance(results, list):
            raise NotionResponseError("Invalid Notion response")

        items: List[Post] = []
        for page in results:
            if not isinstance(page, dict):
                logger.warning("Skipping non-object record in Notion results.")
                continue
            post = normalize_post(page)
            # Hide の除外は Notion 側 filter が本筋だが、ここでも落としておく
            if post.hide:
                continue
            items.append(post)

        filters = build_filters(items)
        logger.info(
            "Fetched %d posts from Notion (raw=%d, has_more=%s).",
            len(items),
            len(results),
            bool(data.get("has_more")),
        )

        next_cursor = data.get("next_cursor")
        return GridResponse(
            ok=True,
            db_id=config.database_id,
            items=items,
            filters=filters,
            has_more=bool(data.get("has_more")),
            next_cursor=next_cursor if isinstance(next_cursor, str) else None,
        )
