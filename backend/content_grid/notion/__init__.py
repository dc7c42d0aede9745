# backend/content_grid/notion/__init__.py

"""
Notion 連携用モジュール群。

主な責務:
- Notion API の設定値を環境変数から解決する
- データベースのスキーマ取得・query を行う薄い HTTP クライアントを提供する
"""
