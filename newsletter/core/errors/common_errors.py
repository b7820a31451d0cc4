"""Common error classes used across layers.

Error Types:
- ValidationError: Input validation failures

Usage:
    from newsletter.core.errors import ValidationError
    from newsletter.core.enums import ErrorCode
    from newsletter.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message="'Title' must not be empty.",
        field="Title",
    ))
"""

from dataclasses import dataclass

from newsletter.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
