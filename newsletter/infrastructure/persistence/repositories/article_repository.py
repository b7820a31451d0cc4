"""Article repository implementation.

SQLAlchemy implementation of the ArticleRepository protocol.
Maps between Article domain entity and Article database model.
"""

from datetime import UTC
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsletter.domain.entities.article import Article
from newsletter.infrastructure.persistence.models.article import (
    Article as ArticleModel,
)


class ArticleRepository:
    """SQLAlchemy implementation of ArticleRepository protocol.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database model (SQLAlchemy)
    - ``add`` only stages the row; the unit of work commits it
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def add(self, article: Article) -> None:
        """Stage a new article for insertion.

        Args:
            article: Article entity to insert.
        """
        self._session.add(self._to_model(article))

    async def find_by_id(self, article_id: UUID) -> Article | None:
        """Find article by ID.

        Args:
            article_id: Unique article identifier.

        Returns:
            Article entity if found, None otherwise.
        """
        stmt = select(ArticleModel).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map database model to domain entity.

        SQLite hands back naive datetimes; they are stored as UTC.

        Args:
            model: Database model.

        Returns:
            Domain entity.
        """
        created_on_utc = model.created_on_utc
        if created_on_utc.tzinfo is None:
            created_on_utc = created_on_utc.replace(tzinfo=UTC)

        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            tags=list(model.tags),
            created_on_utc=created_on_utc,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity to database model.

        Args:
            entity: Domain entity.

        Returns:
            Database model.
        """
        return ArticleModel(
            id=entity.id,
            title=entity.title,
            content=entity.content,
            tags=list(entity.tags),
            created_on_utc=entity.created_on_utc,
        )
