# backend/content_grid/grid/normalizer.py

"""
Notion の生ページ → Post への変換。

同じページからは常に同じ Post が得られる（副作用なし）。
どのプロパティも必須ではなく、無ければ各リーダーのデフォルト値になる。
"""

from typing import Any, Dict, Optional

from .assets import extract_assets
from .properties import (
    read_checkbox,
    read_date,
    read_multi_select,
    read_people,
    read_relation_name,
    read_rich_text,
    read_rollup_name,
    read_select,
    read_title,
)
from .schemas import AssetType, Post

DEFAULT_TITLE = "Untitled"
DEFAULT_STATUS = "Draft"


def _resolve_named(props: Dict[str, Any], field: str) -> Optional[str]:
    """
    Client / Project / Brand の名前を解決する。

    1. "<Field>Name" の rollup
    2. "<Field>" の select
    3. "<Field>" の relation（プレースホルダ）
    """
    return (
        read_rollup_name(props.get(f"{field}Name"))
        or read_select(props.get(field))
        or read_relation_name(props.get(field))
    )


def _resolve_platform(prop: Any) -> Optional[str]:
    """Platform は select が基本。multi_select の DB では先頭の値を使う。"""
    platform = read_select(prop)
    if platform is not None:
        return platform
    platforms = read_multi_select(prop)
    return platforms[0] if platforms else None


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def normalize_post(page: Dict[str, Any]) -> Post:
    props = page.get("properties") if isinstance(page, dict) else None
    if not isinstance(props, dict):
        props = {}
    if not isinstance(page, dict):
        page = {}

    assets = extract_assets(props)
    pinned_prop = props.get("Pinned")

    return Post(
        id=_optional_str(page.get("id")) or "",
        title=read_title(props.get("Name")).strip() or DEFAULT_TITLE,
        publish_date=read_date(props.get("Publish Date")),
        caption=read_rich_text(props.get("Caption")),
        hide=read_checkbox(props.get("Hide")),
        # Pinned は checkbox の DB と select の DB がある
        pinned=read_checkbox(pinned_prop) or read_select(pinned_prop) is not None,
        brand=_resolve_named(props, "Brand"),
        client=_resolve_named(props, "Client"),
        project=_resolve_named(props, "Project"),
        platform=_resolve_platform(props.get("Platform")),
        status=read_select(props.get("Status")) or DEFAULT_STATUS,
        owner=read_people(props.get("Owner")),
        assets=assets,
        is_video=any(asset.type == AssetType.VIDEO for asset in assets),
        created_time=_optional_str(page.get("created_time")),
        url=_optional_str(page.get("url")),
    )
