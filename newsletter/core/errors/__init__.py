"""Core errors package.

Usage:
    from newsletter.core.errors import DomainError, ValidationError
"""

from newsletter.core.enums import ErrorCode
from newsletter.core.errors.common_errors import ValidationError
from newsletter.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ErrorCode",
    "ValidationError",
]
