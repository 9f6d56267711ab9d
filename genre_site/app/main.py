"""
FastAPI 애플리케이션 진입점.

실행:
- 기본: uv run genre-site   (또는 python -m genre_site)
  → 바인딩 성공 후 "Listening on http://127.0.0.1:3000" 한 줄 출력
- 개발: uv run uvicorn genre_site.app.main:app --reload --port 3000
  → 시작 알림은 uvicorn 자체 메시지 ("Uvicorn running on ...")
"""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from uvicorn.main import STARTUP_FAILURE

from genre_site import __version__
from genre_site.core.config import (
    get_reload_templates,
    get_server_address,
    get_templates_dir,
    load_config,
)
from genre_site.core.logging import configure_logging
from genre_site.domain.errors import RenderError
from genre_site.render.html import TemplateRenderer

# Routes
from genre_site.app.routes import pages

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 로깅 설정, 템플릿 레지스트리 로드 (실패 시 소켓 바인딩 전에 기동 중단)
    종료 시: 렌더러 해제
    """
    # Startup
    config = app.state.config
    configure_logging(config)
    try:
        app.state.renderer = TemplateRenderer(
            get_templates_dir(config),
            reload_templates_on_each_render=get_reload_templates(config),
        )
    except RenderError as e:
        logger.critical(f"Template registry failed to load: {e.to_dict()}")
        raise

    yield

    # Shutdown
    app.state.renderer = None


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict | None = None) -> FastAPI:
    """
    앱 생성 (composition root).

    Args:
        config: 설정 dict (None이면 default.yaml 로드)
    """
    app = FastAPI(
        title="Genre Site",
        description="음악 장르 목록을 서버 사이드 템플릿으로 렌더링",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = load_config() if config is None else config
    app.state.renderer = None

    pages.include_pages(app)

    return app


app = create_app()


# =============================================================================
# Server
# =============================================================================


class ListeningServer(uvicorn.Server):
    """바인딩이 끝난 뒤에만 시작 알림을 남기는 uvicorn 서버."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Listening on http://{self.config.host}:{self.config.port}")


# =============================================================================
# CLI Entry Point
# =============================================================================


def main() -> None:
    """uvicorn으로 서버 실행. 플래그 없음, 설정은 default.yaml."""
    config = app.state.config
    level = configure_logging(config)
    host, port = get_server_address(config)

    server = ListeningServer(
        uvicorn.Config(
            app,
            host=host,
            port=port,
            log_level=level.lower(),
            log_config=None,
            lifespan="on",
        )
    )
    server.run()

    # 템플릿 로드 실패 등으로 기동 못 함
    if not server.started:
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
