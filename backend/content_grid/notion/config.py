# backend/content_grid/notion/config.py

"""
Notion 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from content_grid.utils.config import get_env, get_env_int, get_first_env

# 旧バージョンのデプロイ環境との互換のため、複数の名前を順に参照する。
TOKEN_ENV_NAMES: Tuple[str, ...] = (
    "NOTION_TOKEN",
    "NOTION_API_TOKEN",
    "NOTION_SECRET",
    "NOTION_API_KEY",
)
DATABASE_ID_ENV_NAMES: Tuple[str, ...] = (
    "NOTION_DATABASE_ID",
    "NOTION_DB_ID",
    "NOTION_DB",
    "NOTION_CONTENT_DB_ID",
)


class NotionConfigError(RuntimeError):
    """トークンまたはデータベース ID が設定されていない場合の例外。"""


@dataclass(frozen=True)
class NotionConfig:
    """Notion API 用の設定値コンテナ。"""

    api_key: str
    database_id: str
    api_base_url: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"
    timeout_seconds: int = 10


def resolve_token() -> Optional[str]:
    return get_first_env(TOKEN_ENV_NAMES)


def resolve_database_id() -> Optional[str]:
    return get_first_env(DATABASE_ID_ENV_NAMES)


def get_notion_config() -> NotionConfig:
    """
    環境変数から Notion 設定を読み込む。

    必須（いずれか 1 つ）:
      - NOTION_TOKEN / NOTION_API_TOKEN / NOTION_SECRET / NOTION_API_KEY
      - NOTION_DATABASE_ID / NOTION_DB_ID / NOTION_DB / NOTION_CONTENT_DB_ID

    任意:
      - NOTION_API_BASE_URL    (デフォルト: https://api.notion.com/v1)
      - NOTION_API_VERSION     (デフォルト: 2022-06-28)
      - NOTION_TIMEOUT_SECONDS (デフォルト: 10)

    リクエストごとに呼ばれる前提なので、結果はキャッシュしない。
    """
    api_key = resolve_token()
    database_id = resolve_database_id()

    if not api_key or not database_id:
        raise NotionConfigError("Missing NOTION_TOKEN or NOTION_DATABASE_ID env vars.")

    api_base_url = get_env("NOTION_API_BASE_URL", default="https://api.notion.com/v1")
    api_version = get_env("NOTION_API_VERSION", default="2022-06-28")

    return NotionConfig(
        api_key=api_key,
        database_id=database_id,
        api_base_url=api_base_url.rstrip("/"),
        api_version=api_version,
        timeout_seconds=get_env_int("NOTION_TIMEOUT_SECONDS", default=10),
    )
