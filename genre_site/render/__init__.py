"""
Render layer: HTML 출력 생성.

역할:
- 템플릿 + 컨텍스트 → HTML 문자열
- Jinja2
"""

from .html import DEFAULT_TEMPLATES_DIR, TemplateRenderer

__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "TemplateRenderer",
]
