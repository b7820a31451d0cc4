"""Article commands (CQRS write operations).

Commands represent user intent to change article state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class CreateArticle:
    """Create a new article.

    Attributes:
        title: Article title (required, must not be empty).
        content: Article body (required, must not be empty).
        tags: Ordered tags (optional, may be empty).

    Example:
        >>> command = CreateArticle(
        ...     title="Hello",
        ...     content="World",
        ...     tags=("intro", "news"),
        ... )
        >>> result = await dispatcher.send(command)
    """

    title: str = ""
    content: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
