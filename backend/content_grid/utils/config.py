# backend/content_grid/utils/config.py

"""
環境変数読み取り用のユーティリティ。
Notion 以外の設定値でも共通利用できる想定。

必須チェックは呼び出し側（notion.config など）で行う。
"""

import os
from typing import Iterable, Optional


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: 未設定または空文字の場合に返す値
    :return: 文字列値 or default
    """
    value = os.getenv(name)

    if value is None or value == "":
        return default

    return value


def get_first_env(names: Iterable[str]) -> Optional[str]:
    """
    複数の環境変数名を順に調べ、最初に見つかった空でない値を返す。

    旧名称の環境変数を引き続きサポートするためのヘルパー。
    どれも未設定なら None。
    """
    for name in names:
        value = get_env(name)
        if value:
            return value
    return None


def get_env_int(name: str, default: int) -> int:
    """
    整数の環境変数を取得するユーティリティ。

    - 未設定 or パース不能の場合は default を返す。
    """
    raw = get_env(name)
    if raw is None:
        return default

    try:
        return int(raw)
    except (TypeError, ValueError):
        return default
