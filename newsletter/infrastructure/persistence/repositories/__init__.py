"""Repository implementations."""

from newsletter.infrastructure.persistence.repositories.article_repository import (
    ArticleRepository,
)

__all__ = ["ArticleRepository"]
