"""Domain-level error codes (machine-readable).

The wire value of every code is what API clients see in the ``code`` field
of an error body, so values are stable strings.

Categories:
- Generic validation (VALIDATION_FAILED)
- Article creation (CREATE_ARTICLE_*), values follow ``Operation.Reason``
- Storage (STORAGE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Article creation
    CREATE_ARTICLE_VALIDATION = "CreateArticle.Validation"
    CREATE_ARTICLE_STORAGE = "CreateArticle.Storage"

    # Storage errors
    STORAGE_WRITE_FAILED = "storage_write_failed"
