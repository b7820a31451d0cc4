"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Functional areas that group commands."""

    ARTICLES = "articles"


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateArticle).
        handler_class: The handler class (e.g., CreateArticleHandler).
        category: Functional category for organization.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateArticle,
        ...     handler_class=CreateArticleHandler,
        ...     category=CQRSCategory.ARTICLES,
        ...     description="Create a newsletter article",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.handler_class.__name__ != f"{self.command_class.__name__}Handler":
            raise ValueError(
                f"Handler {self.handler_class.__name__} does not follow the "
                f"<Command>Handler naming for {self.command_class.__name__}"
            )
