"""
Data schemas for genre-site.

핸들러 출력은 프레임워크 응답 객체가 아니라 PageResult로 통일.
라우트 어댑터가 Starlette Response로 변환한다.
"""

from dataclasses import dataclass

TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"
HTML_MEDIA_TYPE = "text/html; charset=utf-8"


@dataclass(frozen=True)
class PageResult:
    """핸들러 결과: 응답 본문 + 상태 코드."""
    body: str
    status_code: int = 200
    media_type: str = TEXT_MEDIA_TYPE
