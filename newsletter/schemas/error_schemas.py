"""Error response schema.

Every error produced by the API uses the same body: a machine-readable code
and a human-readable message.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx responses.

    Examples:
        >>> ErrorResponse(
        ...     code="CreateArticle.Validation",
        ...     message="'Title' must not be empty.",
        ... )
    """

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
