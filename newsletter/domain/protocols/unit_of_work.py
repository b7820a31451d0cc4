"""Unit of work protocol.

The unit of work is the transactional scope of one request. Changes staged by
repositories become durable only when ``commit`` succeeds.
"""

from typing import Protocol

from newsletter.core.errors import DomainError
from newsletter.core.result import Result


class UnitOfWork(Protocol):
    """Protocol for committing or discarding staged changes."""

    async def commit(self) -> Result[None, DomainError]:
        """Flush and commit staged changes.

        Returns:
            Success(None) when changes are durable.
            Failure(DomainError) when the store rejected the write; the
            transaction has already been rolled back.
        """
        ...

    async def rollback(self) -> None:
        """Discard staged changes."""
        ...
