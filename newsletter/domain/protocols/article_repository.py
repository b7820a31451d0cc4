"""Article repository protocol.

Defines the interface for article persistence operations.
"""

from typing import Protocol
from uuid import UUID

from newsletter.domain.entities.article import Article


class ArticleRepository(Protocol):
    """Protocol for article persistence operations.

    **Design Principles**:
    - Methods take and return domain entities (Article), not database models
    - ``add`` only stages the article; the unit of work decides when it is
      written durably
    """

    async def add(self, article: Article) -> None:
        """Stage a new article for insertion.

        Args:
            article: Article entity to insert.

        Example:
            >>> await repo.add(article)
            >>> await unit_of_work.commit()
        """
        ...

    async def find_by_id(self, article_id: UUID) -> Article | None:
        """Find article by ID.

        Args:
            article_id: Unique article identifier.

        Returns:
            Article entity if found, None otherwise.
        """
        ...
