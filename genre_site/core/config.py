"""
설정 로드: default.yaml (PyYAML).

우선순위:
1. load_config(path) 인자
2. GENRE_SITE_CONFIG 환경 변수
3. 프로젝트 루트의 default.yaml
파일이 없으면 빈 dict → 각 getter가 constants 기본값 사용.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from genre_site.domain.constants import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NOT_FOUND_STATUS,
    DEFAULT_PORT,
    DEFAULT_RELOAD_TEMPLATES,
)
from genre_site.render.html import DEFAULT_TEMPLATES_DIR

CONFIG_ENV_VAR = "GENRE_SITE_CONFIG"
LOG_LEVEL_ENV_VAR = "GENRE_SITE_LOG_LEVEL"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


# =============================================================================
# Getters
# =============================================================================


def get_server_address(config: dict) -> tuple[str, int]:
    """(host, port)."""
    server = config.get("server") or {}
    return server.get("host", DEFAULT_HOST), int(server.get("port", DEFAULT_PORT))


def get_templates_dir(config: dict) -> Path:
    """템플릿 디렉터리. 설정 없으면 패키지 내장 디렉터리."""
    directory = (config.get("templates") or {}).get("directory")
    return Path(directory) if directory else DEFAULT_TEMPLATES_DIR


def get_reload_templates(config: dict) -> bool:
    """dev 모드 여부 (매 렌더마다 템플릿 재로드)."""
    return bool(
        (config.get("templates") or {}).get(
            "reload_templates_on_each_render", DEFAULT_RELOAD_TEMPLATES
        )
    )


def get_not_found_status(config: dict) -> int:
    """not-found 응답 상태 코드 (기본 200)."""
    return int(
        (config.get("routing") or {}).get("not_found_status", DEFAULT_NOT_FOUND_STATUS)
    )


def get_log_level(config: dict) -> str:
    """로그 레벨. 환경 변수가 설정 파일보다 우선."""
    level = os.getenv(LOG_LEVEL_ENV_VAR) or (config.get("logging") or {}).get(
        "level", DEFAULT_LOG_LEVEL
    )
    return str(level).upper()
