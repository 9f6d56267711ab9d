"""
Error definitions for genre-site.

규칙:
- 조용한 실패 금지 → RenderError로 명시적 실패
- 기동 시 템플릿 로드 실패 → 프로세스 중단 (fail-fast)
- 요청 처리 중 렌더 실패 → 해당 요청만 500 응답
"""

from typing import Any


class RenderError(Exception):
    """
    템플릿 로드/렌더링 실패.

    - 기동 시: TEMPLATE_LOAD_FAILED → lifespan에서 전파, 서버 기동 중단
    - 요청 시: TEMPLATE_NOT_FOUND, TEMPLATE_SYNTAX_ERROR 등 → 핸들러가 500으로 변환

    메시지는 템플릿 위치 기준: "TEMPLATE_SYNTAX_ERROR at navbar:2 (error='...')"

    Usage:
        raise RenderError("TEMPLATE_NOT_FOUND", template="home", missing="navbar")
    """

    def __init__(self, code: str, template: str | None = None, **context: Any) -> None:
        self.code = code
        self.template = template
        self.context = context
        super().__init__(code)

    @property
    def location(self) -> str | None:
        """템플릿 이름 (+ 줄 번호)."""
        if self.template is None:
            return None
        line = self.context.get("line")
        return f"{self.template}:{line}" if line is not None else self.template

    def __str__(self) -> str:
        message = self.code
        if self.location:
            message += f" at {self.location}"
        details = {k: v for k, v in self.context.items() if k != "line"}
        if details:
            message += " (" + ", ".join(f"{k}={v!r}" for k, v in details.items()) + ")"
        return message

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "template": self.template,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Startup ===
    TEMPLATE_LOAD_FAILED = "TEMPLATE_LOAD_FAILED"

    # === Render ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_SYNTAX_ERROR = "TEMPLATE_SYNTAX_ERROR"
    CONTEXT_MISMATCH = "CONTEXT_MISMATCH"  # 컨텍스트 값 누락/타입 불일치
    RENDER_FAILED = "RENDER_FAILED"
    RENDERER_UNAVAILABLE = "RENDERER_UNAVAILABLE"  # lifespan 미실행
