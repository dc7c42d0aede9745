# backend/content_grid/__init__.py
"""
Content grid backend application package.

This package contains:
- main: FastAPI application entrypoint
- notion: Notion API config and client
- grid: post normalization, filter aggregation and the /api/grid endpoint
"""
