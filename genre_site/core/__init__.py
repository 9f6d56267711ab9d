"""
Core layer: 설정 + 로깅.

역할:
- default.yaml 로드, 설정값 getter
- 프로세스 로깅 초기화
"""

from .config import (
    get_log_level,
    get_not_found_status,
    get_reload_templates,
    get_server_address,
    get_templates_dir,
    load_config,
)
from .logging import configure_logging

__all__ = [
    # config
    "load_config",
    "get_server_address",
    "get_templates_dir",
    "get_reload_templates",
    "get_not_found_status",
    "get_log_level",
    # logging
    "configure_logging",
]
