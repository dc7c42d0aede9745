# backend/content_grid/grid/__init__.py

"""
投稿グリッド（/api/grid）用モジュール群。

主な責務:
- Notion ページのプロパティを読み取り、Post に正規化する
- 投稿一覧からフィルタ候補（clients / projects / brands / owners ...）を集計する
"""
