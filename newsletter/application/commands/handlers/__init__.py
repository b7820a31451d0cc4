"""Command handlers."""

from newsletter.application.commands.handlers.create_article_handler import (
    CreateArticleHandler,
)

__all__ = ["CreateArticleHandler"]
