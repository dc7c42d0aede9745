# backend/content_grid/grid/properties.py

"""
Notion のプロパティ値からプレーンな値を取り出すリーダー群。

どのリーダーも例外を投げない。プロパティが存在しない・形が想定と違う場合は
デフォルト値（""、None、False、[]）を返す。データベースのスキーマが
変わってもリクエスト全体を失敗させないための方針。
"""

from typing import Any, Dict, List, Optional

RELATION_PLACEHOLDER = "(relation)"


def _join_plain_text(runs: Any) -> str:
    """rich_text / title の配列から plain_text を連結する。"""
    if not isinstance(runs, list):
        return ""
    parts: List[str] = []
    for run in runs:
        if isinstance(run, dict):
            text = run.get("plain_text")
            if isinstance(text, str):
                parts.append(text)
    return "".join(parts)


def _first_plain_text(runs: Any) -> Optional[str]:
    if not isinstance(runs, list) or not runs:
        return None
    first = runs[0]
    if isinstance(first, dict):
        text = first.get("plain_text")
        if isinstance(text, str):
            return text
    return None


def _named(option: Any) -> Optional[str]:
    if isinstance(option, dict):
        name = option.get("name")
        if isinstance(name, str) and name:
            return name
    return None


def read_title(prop: Any) -> str:
    """
    title プロパティのテキストを連結して返す。
    title が無ければ rich_text を見る。どちらも無ければ空文字。
    """
    if not isinstance(prop, dict):
        return ""
    if isinstance(prop.get("title"), list):
        return _join_plain_text(prop["title"])
    if isinstance(prop.get("rich_text"), list):
        return _join_plain_text(prop["rich_text"])
    return ""


def read_rich_text(prop: Any) -> str:
    if not isinstance(prop, dict):
        return ""
    return _join_plain_text(prop.get("rich_text")).strip()


def read_date(prop: Any) -> Optional[str]:
    """date プロパティの start を返す。"""
    if not isinstance(prop, dict):
        return None
    date = prop.get("date")
    if not isinstance(date, dict):
        return None
    start = date.get("start")
    if isinstance(start, str) and start:
        return start
    return None


def read_checkbox(prop: Any) -> bool:
    if not isinstance(prop, dict):
        return False
    return bool(prop.get("checkbox"))


def read_select(prop: Any) -> Optional[str]:
    """
    select プロパティの name を返す。

    Notion の status 型も同じ {"name": ...} の形なので併せて扱う。
    """
    if not isinstance(prop, dict):
        return None
    return _named(prop.get("select")) or _named(prop.get("status"))


def read_multi_select(prop: Any) -> List[str]:
    if not isinstance(prop, dict):
        return []
    options = prop.get("multi_select")
    if not isinstance(options, list):
        return []
    names: List[str] = []
    for option in options:
        name = _named(option)
        if name is not None:
            names.append(name)
    return names


def read_people(prop: Any) -> Optional[str]:
    """
    people プロパティの先頭 1 名の名前を返す。

    投稿のオーナーは 1 人という扱いなので、2 人目以降は無視する。
    """
    if not isinstance(prop, dict):
        return None
    people = prop.get("people")
    if not isinstance(people, list) or not people:
        return None
    return _named(people[0])


def _format_number(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_rollup_name(prop: Any) -> Optional[str]:
    """
    rollup プロパティから表示名を 1 つ取り出す。

    - type == "array": 先頭要素だけを見る。title / rich_text 要素のみ対応し、
      最初のテキストランを返す
    - type == "number": 数値を文字列にして返す
    - それ以外: None
    """
    if not isinstance(prop, dict):
        return None
    rollup = prop.get("rollup")
    if not isinstance(rollup, dict):
        return None

    kind = rollup.get("type")
    if kind == "array":
        items = rollup.get("array")
        if not isinstance(items, list) or not items:
            return None
        first = items[0]
        if not isinstance(first, dict):
            return None
        if first.get("type") == "title":
            return _first_plain_text(first.get("title"))
        if first.get("type") == "rich_text":
            return _first_plain_text(first.get("rich_text"))
        return None

    if kind == "number":
        return _format_number(rollup.get("number"))

    return None


def read_relation_name(prop: Any) -> Optional[str]:
    """
    relation プロパティにリンク先が 1 件以上あればプレースホルダを返す。

    リンク先ページのタイトル解決には追加の API 呼び出しが必要なので行わない。
    """
    if not isinstance(prop, dict):
        return None
    relation = prop.get("relation")
    if isinstance(relation, list) and relation:
        return RELATION_PLACEHOLDER
    return None


def read_text_url(prop: Any) -> Optional[str]:
    """
    url / rich_text / title / 生の文字列のいずれかから URL 文字列を取り出す。

    url 型の値を最優先する。前後の空白は除去し、空なら None。
    """
    if isinstance(prop, str):
        return prop.strip() or None
    if not isinstance(prop, dict):
        return None

    url = prop.get("url")
    if isinstance(url, str) and url.strip():
        return url.strip()

    if isinstance(prop.get("rich_text"), list):
        return _join_plain_text(prop["rich_text"]).strip() or None

    if isinstance(prop.get("title"), list):
        return _join_plain_text(prop["title"]).strip() or None

    return None


def get_text_url(props: Dict[str, Any], name: str) -> Optional[str]:
    """プロパティ群から name のプロパティを取り出して read_text_url を適用する。"""
    if not isinstance(props, dict):
        return None
    return read_text_url(props.get(name))
