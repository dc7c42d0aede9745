# backend/content_grid/grid/router.py
"""
投稿グリッド用の FastAPI ルーター定義。

- GET /api/grid
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from content_grid.notion.client import NotionClientError, NotionResponseError
from content_grid.notion.config import NotionConfigError

from .schemas import ErrorResponse, GridResponse
from .service import GridService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["grid"])


# テスト時に FastAPI dependency_overrides で差し替え可能にする
def get_grid_service() -> GridService:
    return GridService()


def _error(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(ok=False, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.get(
    "/grid",
    response_model=GridResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Notion の投稿一覧とフィルタ候補を取得",
    description=(
        "Hide=false の投稿を最大 100 件取得し、正規化した items と "
        "clients / projects / brands / owners などのフィルタ候補を返す。"
    ),
)
def get_grid(
    service: GridService = Depends(get_grid_service),
) -> Union[GridResponse, JSONResponse]:
    """
    - 正常系: GridService.fetch_grid() の結果をそのまま返す
    - 設定不足: 400（Notion は呼ばない）
    - Notion 側の失敗 / 不正なレスポンス: 500
    """
    try:
        return service.fetch_grid()
    except NotionConfigError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST)
    except NotionResponseError as exc:
        logger.error("Invalid Notion response: %s", exc)
        return _error("Invalid Notion response", status.HTTP_500_INTERNAL_SERVER_ERROR)
    except NotionClientError as exc:
        logger.exception("Notion API Error")
        return _error(str(exc) or "Notion query failed", status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception:  # noqa: BLE001
        # 予期しない例外は 500 としてクライアントに返す（詳細はログ側で確認）
        logger.exception("Unexpected error while building grid response")
        return _error("Notion query failed", status.HTTP_500_INTERNAL_SERVER_ERROR)
