"""
Pages Routes: 라우터 + 페이지 핸들러.

- /       → home 템플릿 렌더링 (genres: rock, blues, metal)
- /about  → 고정 문구
- 그 외    → "404: page not found"

경로는 퍼센트 디코딩 전 원문(raw_path)으로 정확히 비교 (trailing slash,
대소문자, 인코딩 정규화 없음). 메서드, 헤더, 본문은 보지 않는다.
"""

import logging
from collections.abc import Callable
from functools import partial

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool
from starlette.types import Receive, Scope, Send

from genre_site.core.config import get_not_found_status
from genre_site.domain.constants import (
    ABOUT_PATH,
    ABOUT_TEXT,
    DEFAULT_NOT_FOUND_STATUS,
    HOME_GENRES,
    HOME_PATH,
    HOME_TEMPLATE,
    INTERNAL_ERROR_TEXT,
    NOT_FOUND_TEXT,
)
from genre_site.domain.errors import ErrorCodes, RenderError
from genre_site.domain.schemas import HTML_MEDIA_TYPE, PageResult
from genre_site.render.html import TemplateRenderer

logger = logging.getLogger(__name__)

CATCH_ALL_PATH = "/{path:path}"

# dispatch가 인자를 바인딩해 돌려주는 핸들러
Handler = Callable[[], PageResult]


# =============================================================================
# Handlers
# =============================================================================


def render_home(renderer: TemplateRenderer | None) -> PageResult:
    """
    home 템플릿 렌더링.

    렌더 실패는 서버를 죽이지 않고 이 요청만 500으로 응답.
    """
    context = {"genres": list(HOME_GENRES)}

    try:
        if renderer is None:
            raise RenderError(ErrorCodes.RENDERER_UNAVAILABLE, template=HOME_TEMPLATE)
        body = renderer.render(HOME_TEMPLATE, context)
    except RenderError as e:
        logger.error(f"Home page render failed: {e}")
        return PageResult(body=INTERNAL_ERROR_TEXT, status_code=500)

    return PageResult(body=body, media_type=HTML_MEDIA_TYPE)


def render_about() -> PageResult:
    """고정 소개 문구."""
    return PageResult(body=ABOUT_TEXT)


def render_not_found(status_code: int = DEFAULT_NOT_FOUND_STATUS) -> PageResult:
    """
    미일치 경로 응답.

    기본 상태 코드는 200 (404 아님, 기존 동작 호환). routing.not_found_status로 변경 가능.
    """
    return PageResult(body=NOT_FOUND_TEXT, status_code=status_code)


# =============================================================================
# Router
# =============================================================================


def dispatch(
    path: str,
    renderer: TemplateRenderer | None = None,
    not_found_status: int = DEFAULT_NOT_FOUND_STATUS,
) -> Handler:
    """
    경로 → 핸들러. 정확히 일치하지 않으면 not-found (항상 핸들러 반환).

    Args:
        path: 요청 경로 원문
        renderer: home 핸들러에 바인딩할 렌더러
        not_found_status: not-found 핸들러에 바인딩할 상태 코드
    """
    routes: dict[str, Handler] = {
        HOME_PATH: partial(render_home, renderer),
        ABOUT_PATH: render_about,
    }
    return routes.get(path, partial(render_not_found, not_found_status))


# =============================================================================
# HTTP Adapter
# =============================================================================


def request_path(request: Request) -> str:
    """디코딩 전 경로 (쿼리 제외). raw_path 없는 서버는 scope path 사용."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1")
    return request.url.path


def serve_page(request: Request) -> Response:
    """요청 하나 처리: dispatch → 핸들러 → Response."""
    state = request.app.state
    path = request_path(request)
    handler = dispatch(
        path,
        renderer=getattr(state, "renderer", None),
        not_found_status=get_not_found_status(getattr(state, "config", {})),
    )
    result = handler()

    logger.debug(f"{request.method} {path} → {result.status_code}")
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type,
    )


class PageEndpoint:
    """
    catch-all ASGI 엔드포인트.

    함수가 아닌 ASGI 앱으로 등록해야 Starlette Route가 메서드 제한을 두지 않음
    (TRACE, PROPFIND, 임의 확장 메서드도 dispatch까지 도달).
    serve_page는 스레드풀에서 실행 (dev 모드 파일 재로드가 이벤트 루프를 막지 않음).
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = await run_in_threadpool(serve_page, request)
        await response(scope, receive, send)


def include_pages(app: FastAPI) -> None:
    """앱에 catch-all 라우트 등록."""
    app.add_route(CATCH_ALL_PATH, PageEndpoint(), include_in_schema=False)
