"""Error response builder.

Renders DomainError values (the Failure side of a Result) as JSON error
responses with the matching HTTP status code.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import status
from fastapi.responses import JSONResponse

from newsletter.core.errors import DomainError, ErrorCode
from newsletter.schemas.error_schemas import ErrorResponse


class ErrorResponseBuilder:
    """Build `{code, message}` error responses from domain errors.

    Example:
        >>> error = ValidationError(
        ...     code=ErrorCode.CREATE_ARTICLE_VALIDATION,
        ...     message="'Title' must not be empty.",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error)
        >>> response.status_code
        400
    """

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        """Convert a DomainError to a JSON response.

        Args:
            error: Domain error carried by a Failure.

        Returns:
            JSONResponse with ErrorResponse content.
        """
        body = ErrorResponse(code=error.code.value, message=error.message)
        return JSONResponse(
            status_code=ErrorResponseBuilder.get_status_code(error.code),
            content=body.model_dump(),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Failures are client errors unless the store failed.

        Args:
            code: Domain error code

        Returns:
            HTTP status code

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.CREATE_ARTICLE_STORAGE)
            500
        """
        mapping = {
            ErrorCode.CREATE_ARTICLE_VALIDATION: status.HTTP_400_BAD_REQUEST,
            ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ErrorCode.CREATE_ARTICLE_STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.STORAGE_WRITE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
        }
        return mapping.get(code, status.HTTP_400_BAD_REQUEST)
