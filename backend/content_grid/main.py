# backend/content_grid/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /api/grid エンドポイントを公開する
- /api/health で設定状況を返す
"""

from datetime import datetime, timezone

from fastapi import FastAPI

from content_grid.grid.router import router as grid_router
from content_grid.notion.config import resolve_database_id, resolve_token


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 投稿グリッドエンドポイント (/api/grid)
    - ヘルスチェックエンドポイント (/api/health)
    """
    app = FastAPI(title="Content Grid Backend")

    app.include_router(grid_router)

    @app.get("/api/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        Notion は呼ばず、トークン / DB ID が設定されているかだけを返す。
        """
        return {
            "ok": True,
            "notionToken": resolve_token() is not None,
            "dbId": resolve_database_id(),
            "now": datetime.now(timezone.utc).isoformat(),
        }

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
