# backend/content_grid/grid/assets.py

"""
投稿のプロパティからメディアアセットを取り出すモジュール。

優先順位（最初に見つかったものだけを使い、混在させない）:
  1. Attachment（files）
  2. Link
  3. Canva
"""

import re
from typing import Any, Dict, List, Optional

from .properties import get_text_url
from .schemas import Asset, AssetSource, AssetType

_VIDEO_EXT = re.compile(r"\.(mp4|mov|webm)$")
_IMAGE_EXT = re.compile(r"\.(png|jpg|jpeg|gif|webp)$")


def guess_asset_type(url: Optional[str]) -> AssetType:
    """
    URL の拡張子（クエリ文字列は除く）からメディア種別を推定する。

    URL が空の場合は image として扱う。
    """
    if not url:
        return AssetType.IMAGE

    clean = url.split("?", 1)[0].lower()

    if _VIDEO_EXT.search(clean) or "video" in clean:
        return AssetType.VIDEO
    if _IMAGE_EXT.search(clean) or "image" in clean:
        return AssetType.IMAGE
    return AssetType.UNKNOWN


def _file_url(entry: Any) -> Optional[str]:
    """files プロパティの 1 要素から URL を取り出す（Notion 内部ファイル → 外部 URL の順）。"""
    if not isinstance(entry, dict):
        return None
    for key in ("file", "external"):
        ref = entry.get(key)
        if isinstance(ref, dict):
            url = ref.get("url")
            if isinstance(url, str) and url:
                return url
    return None


def _attachment_assets(prop: Any) -> List[Asset]:
    if not isinstance(prop, dict):
        return []
    files = prop.get("files")
    if not isinstance(files, list):
        return []

    assets: List[Asset] = []
    for entry in files:
        url = _file_url(entry)
        if url is None:
            continue
        assets.append(
            Asset(url=url, type=guess_asset_type(url), source=AssetSource.ATTACHMENT)
        )
    return assets


def extract_assets(props: Dict[str, Any]) -> List[Asset]:
    """
    プロパティ群からアセット一覧を返す。

    Attachment に URL を持つファイルがあればそれだけを返し、Link / Canva は見ない。
    URL を解決できないファイルは読み飛ばす。
    """
    if not isinstance(props, dict):
        return []

    attachments = _attachment_assets(props.get("Attachment"))
    if attachments:
        return attachments

    for name, source in (("Link", AssetSource.LINK), ("Canva", AssetSource.CANVA)):
        url = get_text_url(props, name)
        if url:
            return [Asset(url=url, type=guess_asset_type(url), source=source)]

    return []
