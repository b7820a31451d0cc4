"""Article request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/articles - Create article
"""

from pydantic import BaseModel, ConfigDict, Field


class CreateArticleRequest(BaseModel):
    """Request schema for article creation.

    POST /api/articles
    Returns: 200 OK with the new article id

    Fields default to empty so a missing field is reported by the
    CreateArticle validator (400) rather than by request parsing.
    """

    title: str | None = Field(
        default="",
        description="Article title (must not be empty)",
        examples=["Hello"],
    )
    content: str | None = Field(
        default="",
        description="Article body (must not be empty)",
        examples=["World"],
    )
    tags: list[str] | None = Field(
        default_factory=list,
        description="Ordered tags",
        examples=[["intro", "news"]],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hello",
                "content": "World",
                "tags": ["intro"],
            }
        }
    )
