"""
test_pages.py - Pages Routes 유닛 테스트

검증 포인트:
1. dispatch: 정확 일치만 인식, 나머지 전부 not-found
2. 핸들러 고정 응답
3. home 렌더 실패 → 500 (서버 계속 동작)
4. HTTP 어댑터: 메서드 무관, 경로 원문 비교
"""

import logging
from functools import partial
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from genre_site.app.routes.pages import (
    dispatch,
    include_pages,
    render_about,
    render_home,
    render_not_found,
)
from genre_site.domain.constants import ABOUT_TEXT, INTERNAL_ERROR_TEXT, NOT_FOUND_TEXT
from genre_site.domain.errors import ErrorCodes, RenderError
from genre_site.domain.schemas import HTML_MEDIA_TYPE
from genre_site.render.html import TemplateRenderer

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def renderer(templates_dir: Path) -> TemplateRenderer:
    return TemplateRenderer(templates_dir, reload_templates_on_each_render=False)


@pytest.fixture
def broken_renderer() -> MagicMock:
    """항상 렌더 실패하는 렌더러."""
    mock = MagicMock(spec=TemplateRenderer)
    mock.render.side_effect = RenderError(
        ErrorCodes.TEMPLATE_NOT_FOUND, template="home"
    )
    return mock


@pytest.fixture
def router_app(renderer: TemplateRenderer) -> FastAPI:
    """lifespan 없이 페이지 라우트만 붙인 앱."""
    app = FastAPI()
    include_pages(app)
    app.state.renderer = renderer
    app.state.config = {}
    return app


# =============================================================================
# 1. dispatch
# =============================================================================


class TestDispatch:
    """dispatch 테스트."""

    def test_home_binds_renderer(self, renderer: TemplateRenderer):
        handler = dispatch("/", renderer=renderer)

        assert isinstance(handler, partial)
        assert handler.func is render_home
        assert "metal" in handler().body

    def test_about(self):
        assert dispatch("/about") is render_about

    @pytest.mark.parametrize(
        "path",
        [
            "", "/nope", "/about/", "//", "/About", "/ABOUT", "/about/me",
            "/index.html", "about", "/%61bout", "/about%2F",
        ],
    )
    def test_everything_else_is_not_found(self, path: str):
        """trailing slash, 대소문자, prefix, 퍼센트 인코딩 모두 미일치."""
        result = dispatch(path)()

        assert result.body == NOT_FOUND_TEXT
        assert result.status_code == 200

    def test_not_found_status_bound(self):
        assert dispatch("/nope", not_found_status=404)().status_code == 404

    def test_not_found_status_does_not_touch_known_routes(self):
        assert dispatch("/about", not_found_status=404)().status_code == 200


# =============================================================================
# 2. 핸들러
# =============================================================================


class TestHandlers:
    """핸들러 테스트."""

    def test_render_home(self, renderer: TemplateRenderer):
        result = render_home(renderer)

        assert result.status_code == 200
        assert result.media_type == HTML_MEDIA_TYPE
        body = result.body
        assert body.index("rock") < body.index("blues") < body.index("metal")

    def test_render_home_passes_genres_context(self):
        """home 템플릿 + genres 컨텍스트로 호출."""
        mock = MagicMock(spec=TemplateRenderer)
        mock.render.return_value = "<html></html>"

        render_home(mock)

        mock.render.assert_called_once_with(
            "home", {"genres": ["rock", "blues", "metal"]}
        )

    def test_render_about(self):
        result = render_about()

        assert result.body == "This is Mary Yang's research study project."
        assert result.body == ABOUT_TEXT
        assert result.status_code == 200

    def test_render_not_found_default_status(self):
        """기본값: 200 (기존 동작 호환)."""
        result = render_not_found()

        assert result.body == "404: page not found"
        assert result.status_code == 200

    def test_render_not_found_custom_status(self):
        assert render_not_found(404).status_code == 404


# =============================================================================
# 3. 렌더 실패
# =============================================================================


class TestRenderFailure:
    """home 렌더 실패 처리 테스트."""

    def test_render_error_becomes_500(self, broken_renderer: MagicMock):
        result = render_home(broken_renderer)

        assert result.status_code == 500
        assert result.body == INTERNAL_ERROR_TEXT

    def test_render_error_is_logged(self, broken_renderer: MagicMock, caplog):
        with caplog.at_level(logging.ERROR, logger="genre_site.app.routes.pages"):
            render_home(broken_renderer)

        assert "TEMPLATE_NOT_FOUND at home" in caplog.text

    def test_missing_renderer_becomes_500(self):
        """lifespan 미실행 (renderer None)."""
        result = render_home(None)

        assert result.status_code == 500

    def test_failure_does_not_affect_other_routes(
        self, router_app: FastAPI, broken_renderer: MagicMock
    ):
        """home 실패 중에도 /about, not-found 정상."""
        router_app.state.renderer = broken_renderer
        client = TestClient(router_app)

        assert client.get("/").status_code == 500
        assert client.get("/about").text == ABOUT_TEXT
        assert client.get("/nope").text == NOT_FOUND_TEXT


# =============================================================================
# 4. HTTP 어댑터
# =============================================================================


class TestServePage:
    """catch-all 엔드포인트 테스트."""

    def test_home_is_html(self, router_app: FastAPI):
        response = TestClient(router_app).get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_about_is_plain_text(self, router_app: FastAPI):
        response = TestClient(router_app).get("/about")

        assert response.text == ABOUT_TEXT
        assert "text/plain" in response.headers["content-type"]

    def test_trailing_slash_not_redirected(self, router_app: FastAPI):
        """/about/ → redirect 없이 not-found."""
        response = TestClient(router_app).get("/about/", follow_redirects=False)

        assert response.status_code == 200
        assert response.text == NOT_FOUND_TEXT

    def test_percent_encoded_path_not_decoded(self, router_app: FastAPI):
        """/%61bout 은 /about 으로 디코딩하지 않음."""
        response = TestClient(router_app).get("/%61bout")

        assert response.text == NOT_FOUND_TEXT

    def test_query_string_ignored(self, router_app: FastAPI):
        response = TestClient(router_app).get("/about?x=1")

        assert response.text == ABOUT_TEXT

    @pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "BREW"])
    def test_uncommon_methods_routed(self, router_app: FastAPI, method: str):
        """405 없이 모든 메서드가 dispatch 까지 도달."""
        response = TestClient(router_app).request(method, "/about")

        assert response.status_code == 200
        assert response.text == ABOUT_TEXT

    def test_not_found_status_from_config(self, router_app: FastAPI):
        router_app.state.config = {"routing": {"not_found_status": 404}}

        response = TestClient(router_app).get("/nope")

        assert response.status_code == 404
        assert response.text == NOT_FOUND_TEXT
