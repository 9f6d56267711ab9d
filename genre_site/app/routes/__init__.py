"""
FastAPI Routes.

페이지 라우트 (catch-all 하나, 경로 분기는 pages.dispatch)
"""

from . import pages

__all__ = ["pages"]
