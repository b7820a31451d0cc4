"""Domain entities."""

from newsletter.domain.entities.article import Article

__all__ = ["Article"]
