"""태그 클라우드 렌더링 모듈."""

from __future__ import annotations

from .html import render_cloud_html, render_stylesheet, write_cloud_html, write_stylesheet

__all__ = [
    "render_cloud_html",
    "render_stylesheet",
    "write_cloud_html",
    "write_stylesheet",
]
