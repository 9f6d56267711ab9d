"""
Logging setup: stdlib logging.

- 모듈마다 logger = logging.getLogger(__name__)
- 레벨: default.yaml logging.level, GENRE_SITE_LOG_LEVEL 환경 변수로 덮어쓰기
- lifespan에서 호출 → `genre-site`, `uvicorn genre_site.app.main:app` 모두 적용
"""

import logging
import sys

from genre_site.core.config import get_log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

PACKAGE_LOGGER = "genre_site"


def configure_logging(config: dict) -> str:
    """
    패키지 로거 레벨 설정 + 루트 핸들러 준비.

    루트에 이미 핸들러가 있으면 (uvicorn, pytest 등) 그대로 둔다.

    Args:
        config: 로드된 설정 dict

    Returns:
        적용된 레벨 이름 (uvicorn log_level에도 전달)
    """
    level = get_log_level(config)
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    if not logging.getLogger().handlers:
        logging.basicConfig(
            stream=sys.stdout,
            format=LOG_FORMAT,
            datefmt=LOG_DATEFMT,
        )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level
