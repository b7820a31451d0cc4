"""SQLAlchemy unit of work.

Implements the UnitOfWork protocol on top of the request's AsyncSession.
SQLAlchemy exceptions and driver connection errors (OSError, e.g. connection
refused) raised while flushing or committing are caught here and returned as
DatabaseError data, after rolling the transaction back.
"""

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsletter.core.enums import ErrorCode
from newsletter.core.result import Failure, Result, Success
from newsletter.infrastructure.enums import InfrastructureErrorCode
from newsletter.infrastructure.errors import DatabaseError


class SqlAlchemyUnitOfWork:
    """Unit of work bound to one request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def commit(self) -> Result[None, DatabaseError]:
        """Flush and commit staged changes.

        Returns:
            Success(None) when committed.
            Failure(DatabaseError) when the store rejected the write or
            could not be reached.
        """
        try:
            await self._session.commit()
        except (SQLAlchemyError, OSError) as e:
            rollback_error = await self._try_rollback()
            return Failure(error=self._to_error(e, rollback_error))
        return Success(value=None)

    async def rollback(self) -> None:
        """Discard staged changes."""
        await self._session.rollback()

    async def _try_rollback(self) -> Exception | None:
        """Roll back after a failed commit.

        An unreachable database fails the rollback the same way; the error
        is returned so it is reported with the commit failure.

        Returns:
            The rollback exception, or None if the rollback succeeded.
        """
        try:
            await self._session.rollback()
        except (SQLAlchemyError, OSError) as e:
            return e
        return None

    @staticmethod
    def _to_error(
        exc: SQLAlchemyError | OSError,
        rollback_error: Exception | None = None,
    ) -> DatabaseError:
        """Map a commit exception to a DatabaseError.

        Args:
            exc: Exception raised by the session.
            rollback_error: Exception raised by the follow-up rollback, if any.

        Returns:
            DatabaseError carrying the matching infrastructure code.
        """
        if isinstance(exc, OSError):
            infrastructure_code = InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
        elif isinstance(exc, IntegrityError):
            infrastructure_code = InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION
        elif isinstance(exc, DBAPIError) and exc.connection_invalidated:
            infrastructure_code = InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
        elif isinstance(exc, DBAPIError):
            infrastructure_code = InfrastructureErrorCode.DATABASE_DATA_ERROR
        else:
            infrastructure_code = InfrastructureErrorCode.DATABASE_ERROR

        details = None
        if rollback_error is not None:
            details = {"rollback_error": type(rollback_error).__name__}

        return DatabaseError(
            code=ErrorCode.STORAGE_WRITE_FAILED,
            message=f"Database write failed ({type(exc).__name__})",
            infrastructure_code=infrastructure_code,
            details=details,
        )
