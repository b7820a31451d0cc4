"""Database models.

Import every model here so BaseModel.metadata knows all tables.
"""

from newsletter.infrastructure.persistence.models.article import Article

__all__ = ["Article"]
