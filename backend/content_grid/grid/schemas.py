# backend/content_grid/grid/schemas.py
"""
/api/grid 用の Pydantic スキーマ定義。

- Post: Notion の 1 ページを正規化した投稿レコード
- FilterSet: 投稿一覧から集計したフィルタ候補
- GridResponse / ErrorResponse: エンドポイントのレスポンス全体

JSON 上のキーはフロントエンドに合わせて camelCase（publishDate, hasMore など）。
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AssetType(str, Enum):
    """アセットのメディア種別。"""

    IMAGE = "image"
    VIDEO = "video"
    UNKNOWN = "unknown"


class AssetSource(str, Enum):
    """アセットをどのプロパティから取得したか。"""

    ATTACHMENT = "attachment"
    LINK = "link"
    CANVA = "canva"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Asset(_CamelModel):
    url: str
    type: AssetType
    source: AssetSource


class Post(_CamelModel):
    """
    Notion の 1 ページを正規化した投稿レコード。

    生成後に変更されることはなく、レスポンスのシリアライズ後に破棄される。
    """

    id: str = Field("", description="Notion ページ ID")
    title: str = Field("Untitled", description="Name プロパティ。空なら Untitled")
    publish_date: Optional[str] = Field(None, description="Publish Date の開始日（ISO 文字列）")
    caption: str = Field("", description="Caption（rich_text）")
    hide: bool = False
    pinned: bool = False
    brand: Optional[str] = None
    client: Optional[str] = None
    project: Optional[str] = None
    platform: Optional[str] = None
    status: str = Field("Draft", description="Status（select 値）。未設定なら Draft")
    owner: Optional[str] = Field(None, description="Owner（people）の先頭 1 名のみ")
    assets: Tuple[Asset, ...] = ()
    is_video: bool = False
    created_time: Optional[str] = None
    url: Optional[str] = None


class OwnerFacet(_CamelModel):
    """投稿数順に並べたオーナーと表示色。"""

    name: str
    count: int
    color: str


class FilterSet(_CamelModel):
    """
    投稿一覧から毎リクエスト再計算されるフィルタ候補。

    platforms はデータから集計せず、固定リストを返す（UI の安定性のため）。
    """

    clients: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    brands: Tuple[str, ...] = ()
    statuses: Tuple[str, ...] = ()
    platforms: Tuple[str, ...] = ()
    owners: Tuple[OwnerFacet, ...] = ()


class GridResponse(_CamelModel):
    """/api/grid の正常系レスポンス。"""

    ok: bool = True
    db_id: str
    items: List[Post]
    filters: FilterSet
    has_more: bool = False
    next_cursor: Optional[str] = None


class ErrorResponse(_CamelModel):
    """/api/grid の異常系レスポンス。"""

    ok: bool = False
    error: str
