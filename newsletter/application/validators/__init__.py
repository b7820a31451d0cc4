"""Command validators."""

from newsletter.application.validators.create_article_validator import (
    CreateArticleValidator,
    ValidationResult,
)

__all__ = ["CreateArticleValidator", "ValidationResult"]
