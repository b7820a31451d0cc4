"""Commands (CQRS write operations)."""

from newsletter.application.commands.article_commands import CreateArticle

__all__ = ["CreateArticle"]
