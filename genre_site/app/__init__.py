"""
App layer: HTTP 서버 (FastAPI + uvicorn).

역할:
- lifespan에서 렌더러 생성, app.state로 요청에 공유
- 라우팅/핸들러는 routes/pages.py

주의: 폴더 구분
- genre_site/app/templates/ → Jinja2 HTML (home, styles, navbar)
- genre_site/render/ → 코드 (TemplateRenderer)
"""
