"""Domain layer: errors, schemas, constants."""

from .errors import ErrorCodes, RenderError
from .schemas import HTML_MEDIA_TYPE, TEXT_MEDIA_TYPE, PageResult

__all__ = [
    "ErrorCodes",
    "RenderError",
    "PageResult",
    "HTML_MEDIA_TYPE",
    "TEXT_MEDIA_TYPE",
]
