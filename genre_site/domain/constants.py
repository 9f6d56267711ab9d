"""
Domain Constants: 사이트 전역 상수.

라우트 경로, 고정 응답 문구, 템플릿 이름, 기본 설정값.
"""

# =============================================================================
# Routes (라우트 경로)
# =============================================================================
# 정확히 일치하는 경로만 인식. 그 외는 모두 not-found.

HOME_PATH = "/"
ABOUT_PATH = "/about"

# =============================================================================
# Fixed Responses (고정 응답 문구)
# =============================================================================

ABOUT_TEXT = "This is Mary Yang's research study project."
NOT_FOUND_TEXT = "404: page not found"
INTERNAL_ERROR_TEXT = "500: internal server error"

# =============================================================================
# Home Page Data
# =============================================================================
# 순서 유지 필수: rock → blues → metal

HOME_GENRES = ("rock", "blues", "metal")

# =============================================================================
# Templates (템플릿 레지스트리)
# =============================================================================
# 이름 → 파일명. 템플릿끼리는 이름으로 include 한다.
# templates/
# ├── index.html   (home)
# ├── styles.html  (styles)
# └── navbar.html  (navbar)

HOME_TEMPLATE = "home"
STYLES_TEMPLATE = "styles"
NAVBAR_TEMPLATE = "navbar"

TEMPLATE_FILES = {
    HOME_TEMPLATE: "index.html",
    STYLES_TEMPLATE: "styles.html",
    NAVBAR_TEMPLATE: "navbar.html",
}

# =============================================================================
# Defaults (default.yaml 누락 시 기본값)
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_NOT_FOUND_STATUS = 200  # 기존 동작 호환 (404 아님), DESIGN.md 참조
DEFAULT_RELOAD_TEMPLATES = True
