"""
Pytest fixtures for genre-site tests.

구성:
- 템플릿 디렉터리 (패키지 내장 / tmp 복사본)
- 테스트용 설정 (dev 모드 off → 결정적 렌더링)
- 앱 + TestClient
"""

import shutil
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from genre_site.app.main import create_app
from genre_site.render.html import DEFAULT_TEMPLATES_DIR

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def templates_dir() -> Path:
    """패키지 내장 템플릿 디렉터리."""
    return DEFAULT_TEMPLATES_DIR


@pytest.fixture
def tmp_templates_dir(tmp_path: Path, templates_dir: Path) -> Path:
    """수정 가능한 템플릿 복사본."""
    target = tmp_path / "templates"
    shutil.copytree(templates_dir, target)
    return target


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_config(tmp_templates_dir: Path) -> dict:
    """테스트용 설정."""
    return {
        "server": {"host": "127.0.0.1", "port": 3000},
        "templates": {
            "directory": str(tmp_templates_dir),
            "reload_templates_on_each_render": False,
        },
        "routing": {"not_found_status": 200},
        "logging": {"level": "DEBUG"},
    }


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(test_config: dict) -> FastAPI:
    """테스트용 FastAPI 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """테스트 클라이언트 (lifespan 실행)."""
    with TestClient(app) as client:
        yield client
