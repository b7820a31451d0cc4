"""Article database model.

Reference:
    - alembic/versions/20261019_0900-3f1c2a7d9b10_create_articles_table.py
"""

from sqlalchemy import JSON, Text
from sqlalchemy.orm import Mapped, mapped_column

from newsletter.infrastructure.persistence.base import BaseModel


class Article(BaseModel):
    """Article model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_on_utc: Creation instant (from BaseModel)
        title: Article title
        content: Article body
        tags: Ordered tags serialized as a JSON array

    Example:
        article = Article(
            id=uuid4(),
            title="Hello",
            content="World",
            tags=["intro"],
            created_on_utc=datetime.now(UTC),
        )
        session.add(article)
        await session.commit()
    """

    __tablename__ = "articles"

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Article title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Article body",
    )

    tags: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered tags (JSON array)",
    )
