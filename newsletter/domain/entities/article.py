"""Article domain entity.

An article is written once by the create-article use case and is never
updated or deleted afterwards.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True)
class Article:
    """Newsletter article entity.

    Attributes:
        id: Unique article identifier, assigned at creation.
        title: Article title, stored verbatim.
        content: Article body, stored verbatim.
        tags: Ordered tags, stored verbatim.
        created_on_utc: UTC instant the article was created.

    Example:
        >>> article = Article(
        ...     id=uuid4(),
        ...     title="Hello",
        ...     content="World",
        ...     tags=["intro"],
        ... )
        >>> article.created_on_utc.tzinfo
        datetime.timezone.utc
    """

    id: UUID
    title: str
    content: str
    tags: list[str] = field(default_factory=list)
    created_on_utc: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __repr__(self) -> str:
        """Return repr for debugging.

        Returns:
            str: String representation.
        """
        return f"Article(id={self.id!s}, title={self.title!r}, tags={self.tags!r})"
