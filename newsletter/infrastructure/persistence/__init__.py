"""Database persistence infrastructure.

This module provides database-related functionality including:
- Base model for all database entities
- Database connection and session management
- Unit of work and repository implementations
"""

from newsletter.infrastructure.persistence.base import BaseModel
from newsletter.infrastructure.persistence.database import Database
from newsletter.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseModel",
    "Database",
    "SqlAlchemyUnitOfWork",
]
