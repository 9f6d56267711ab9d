"""
HTML 렌더러: Jinja2 기반.

- 템플릿 레지스트리: 이름 → 파일 (home, styles, navbar)
- 템플릿끼리는 레지스트리 이름으로 include: {% include "navbar" %}
- 기동 시 전부 컴파일 (fail-fast), 하나라도 실패하면 RenderError
- dev 모드 (reload_templates_on_each_render=True): 캐시 없이 매 렌더마다 디스크에서 다시 읽음
"""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from genre_site.domain.constants import TEMPLATE_FILES
from genre_site.domain.errors import ErrorCodes, RenderError

logger = logging.getLogger(__name__)

# 패키지 기본 템플릿 디렉터리
DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "app" / "templates"


class RegistryLoader(BaseLoader):
    """레지스트리(이름 → 파일 경로)에서 소스를 읽는 Jinja2 로더."""

    def __init__(self, registry: Mapping[str, Path]) -> None:
        self.registry = dict(registry)

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str, Callable[[], bool]]:
        path = self.registry.get(template)
        if path is None:
            raise TemplateNotFound(template)

        try:
            source = path.read_text(encoding="utf-8")
            mtime = os.path.getmtime(path)
        except FileNotFoundError as e:
            raise TemplateNotFound(template) from e

        def uptodate() -> bool:
            try:
                return os.path.getmtime(path) == mtime
            except OSError:
                return False

        return source, str(path), uptodate

    def list_templates(self) -> list[str]:
        return sorted(self.registry)


class TemplateRenderer:
    """
    템플릿 레지스트리 소유 + 이름으로 렌더링.

    기동 시 한 번 생성, 이후 구조 변경 없음 (모든 요청이 공유).

    Usage:
        renderer = TemplateRenderer(templates_dir)
        html = renderer.render("home", {"genres": ["rock"]})
    """

    def __init__(
        self,
        templates_dir: Path,
        templates: Mapping[str, str] | None = None,
        reload_templates_on_each_render: bool = True,
    ):
        """
        Args:
            templates_dir: 템플릿 파일 디렉터리
            templates: 이름 → 파일명 매핑 (기본: TEMPLATE_FILES)
            reload_templates_on_each_render: True면 캐시 없이 매번 디스크에서 로드

        Raises:
            RenderError: TEMPLATE_LOAD_FAILED
        """
        if templates is None:
            templates = TEMPLATE_FILES

        self.templates_dir = Path(templates_dir)
        self.reload_templates_on_each_render = reload_templates_on_each_render
        self._registry = {
            name: self.templates_dir / filename
            for name, filename in templates.items()
        }

        self._env = Environment(
            loader=RegistryLoader(self._registry),
            autoescape=True,
            undefined=StrictUndefined,
            # cache_size=0: 컴파일 결과를 보관하지 않음 → 매 렌더마다 재로드
            cache_size=0 if reload_templates_on_each_render else -1,
            auto_reload=reload_templates_on_each_render,
        )

        self._load_all()

    @property
    def names(self) -> list[str]:
        """등록된 템플릿 이름 목록."""
        return sorted(self._registry)

    def _load_all(self) -> None:
        """레지스트리 전체 컴파일. 부분 레지스트리는 허용하지 않음."""
        for name, path in self._registry.items():
            if not path.is_file():
                raise RenderError(
                    ErrorCodes.TEMPLATE_LOAD_FAILED,
                    template=name,
                    path=str(path),
                    error="file not found",
                )
            try:
                self._env.get_template(name)
            except TemplateSyntaxError as e:
                raise RenderError(
                    ErrorCodes.TEMPLATE_LOAD_FAILED,
                    template=name,
                    path=str(path),
                    line=e.lineno,
                    error=e.message,
                ) from e
            except Exception as e:
                raise RenderError(
                    ErrorCodes.TEMPLATE_LOAD_FAILED,
                    template=name,
                    path=str(path),
                    error=str(e),
                ) from e

        logger.info(
            f"Loaded {len(self._registry)} templates from {self.templates_dir} "
            f"(reload_on_render={self.reload_templates_on_each_render})"
        )

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """
        이름으로 템플릿 렌더링.

        Args:
            name: 레지스트리 이름 (예: "home")
            context: 렌더 컨텍스트

        Returns:
            렌더링된 HTML

        Raises:
            RenderError: TEMPLATE_NOT_FOUND, TEMPLATE_SYNTAX_ERROR,
                CONTEXT_MISMATCH, RENDER_FAILED
        """
        if name not in self._registry:
            raise RenderError(ErrorCodes.TEMPLATE_NOT_FOUND, template=name)

        try:
            template = self._env.get_template(name)
            return template.render(context)

        except TemplateNotFound as e:
            # 파일이 사라졌거나 include 대상이 미등록
            raise RenderError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                template=name,
                missing=e.name,
            ) from e
        except TemplateSyntaxError as e:
            raise RenderError(
                ErrorCodes.TEMPLATE_SYNTAX_ERROR,
                template=name,
                line=e.lineno,
                error=e.message,
            ) from e
        except (UndefinedError, TypeError) as e:
            raise RenderError(
                ErrorCodes.CONTEXT_MISMATCH,
                template=name,
                error=str(e),
            ) from e
        except Exception as e:
            raise RenderError(
                ErrorCodes.RENDER_FAILED,
                template=name,
                error=str(e),
            ) from e
