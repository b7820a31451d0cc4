"""HTTP request/response schemas."""

from newsletter.schemas.article_schemas import CreateArticleRequest
from newsletter.schemas.error_schemas import ErrorResponse

__all__ = ["CreateArticleRequest", "ErrorResponse"]
