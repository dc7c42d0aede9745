# backend/content_grid/notion/client.py

"""
Notion API との通信を担当するクライアントモジュール。
"""

from typing import Any, Dict, Optional

import httpx

from .config import NotionConfig, get_notion_config

# Notion の databases.query が 1 回で返す最大件数。
MAX_PAGE_SIZE = 100


class NotionClientError(RuntimeError):
    """Notion クライアント全般の例外。"""


class NotionAuthError(NotionClientError):
    """認証・権限関連のエラー。"""


class NotionAPIError(NotionClientError):
    """その他 Notion API 呼び出し時のエラー。"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotionResponseError(NotionAPIError):
    """レスポンスの形式が想定と異なる場合のエラー。"""


def _upstream_message(response: httpx.Response) -> Optional[str]:
    """
    Notion のエラーレスポンス body から message を取り出す。
    JSON でない場合や message が無い場合は None。
    """
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class NotionClient:
    """
    Notion API の薄いラッパークライアント。

    - データベースのスキーマ取得
    - データベースの query（1 ページ分のみ）
    """

    def __init__(
        self,
        config: Optional[NotionConfig] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.config = config or get_notion_config()
        self._timeout = timeout if timeout is not None else self.config.timeout_seconds

    def _build_headers(self) -> Dict[str, str]:
        """
        Notion API 呼び出しに必要なヘッダーを構築。
        """
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Notion-Version": self.config.api_version,
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        HTTP レスポンスコードに応じて適切な例外を投げる。
        """
        if response.status_code < 400:
            return

        message = _upstream_message(response)
        if response.status_code == 401:
            raise NotionAuthError(message or "Unauthorized. Check NOTION_TOKEN.")
        if response.status_code == 403:
            raise NotionAuthError(message or "Forbidden. Check Notion integration permissions.")
        raise NotionAPIError(
            message or f"Notion API error: {response.status_code} {response.text}",
            status_code=response.status_code,
        )

    def _parse_object(self, response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise NotionResponseError("Invalid Notion response") from exc
        if not isinstance(data, dict):
            raise NotionResponseError("Invalid Notion response")
        return data

    @property
    def database_url(self) -> str:
        return f"{self.config.api_base_url}/databases/{self.config.database_id}"

    def retrieve_database(self) -> Dict[str, Any]:
        """
        データベースのメタデータ（properties スキーマを含む）を取得する。

        Hide / Pinned などのプロパティが存在するかを query 前に判定するために使う。
        """
        try:
            response = httpx.get(
                self.database_url,
                headers=self._build_headers(),
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)
        return self._parse_object(response)

    def query_database(self, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        データベースを 1 回だけ query し、レスポンス JSON をそのまま返す。

        page_size は MAX_PAGE_SIZE に切り詰める。
        results の検証と内部モデルへの変換は上位レイヤー（grid.service）で行う。
        """
        body: Dict[str, Any] = dict(payload or {})
        page_size = body.get("page_size", MAX_PAGE_SIZE)
        if not isinstance(page_size, int) or page_size <= 0:
            page_size = MAX_PAGE_SIZE
        body["page_size"] = min(page_size, MAX_PAGE_SIZE)

        try:
            response = httpx.post(
                f"{self.database_url}/query",
                headers=self._build_headers(),
                json=body,
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)
        return self._parse_object(response)
