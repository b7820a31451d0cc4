"""Validation framework for input validation.

This module provides utility functions for common validation patterns.
All validation functions return Result types for consistent error handling.

Usage:
    from newsletter.core.validation import validate_not_empty
    from newsletter.core.result import Success, Failure

    result = validate_not_empty(command.title, "Title")
    match result:
        case Success(value=title):
            # Title is present
            pass
        case Failure(error=error):
            # Handle validation error
            print(error.message)
"""

from typing import Any

from newsletter.core.errors import ErrorCode, ValidationError
from newsletter.core.result import Failure, Result, Success


def is_empty(value: Any) -> bool:
    """Check whether a value counts as empty.

    None, whitespace-only strings and empty collections are empty.

    Args:
        value: Value to check.

    Returns:
        True if the value is empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if is_empty(value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"'{field_name}' must not be empty.",
                field=field_name,
            )
        )
    return Success(value=value)
