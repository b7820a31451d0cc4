"""Infrastructure errors."""

from newsletter.infrastructure.errors.infrastructure_error import (
    DatabaseError,
    InfrastructureError,
)

__all__ = ["DatabaseError", "InfrastructureError"]
