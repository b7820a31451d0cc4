"""Global exception handlers for FastAPI application.

This module provides exception handlers that catch exceptions escaping the
routers and convert them to the API's `{code, message}` error body.

Handlers:
    http_exception_handler: Converts HTTPException (404, 405, ...)
    validation_exception_handler: Converts RequestValidationError (malformed body)
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsletter.core.container import get_logger
from newsletter.schemas.error_schemas import ErrorResponse


# HTTP status code to code suffix mapping
_HTTP_STATUS_CODES: dict[int, str] = {
    400: "BadRequest",
    401: "Unauthorized",
    403: "Forbidden",
    404: "NotFound",
    405: "MethodNotAllowed",
    409: "Conflict",
    415: "UnsupportedMediaType",
    422: "UnprocessableEntity",
    500: "InternalServerError",
    503: "ServiceUnavailable",
}


def _error_response(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON error response with the standard body."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=code, message=message).model_dump(),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to the standard error body.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing, a handler or a dependency.

    Returns:
        JSONResponse with the exception's status code.
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    suffix = _HTTP_STATUS_CODES.get(exc.status_code, "Error")
    return _error_response(
        exc.status_code,
        f"Http.{suffix}",
        exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to the standard error body.

    Raised when the body is not JSON or a field has the wrong type. Empty
    fields are not request errors: they reach the command validator.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse (422) listing every offending field.
    """
    assert isinstance(exc, RequestValidationError)

    messages: list[str] = []
    for error in exc.errors():
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "body"
        messages.append(f"{field_name}: {error.get('msg', 'Validation failed')}")

    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request.Validation",
        "\n".join(messages) or "Request validation failed",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Prevents leaking stack traces or internal details to API consumers.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse (500)
    """
    get_logger().error(
        "Unhandled exception",
        error=exc,
        path=str(request.url.path),
        method=request.method,
    )
    trace_id = getattr(request.state, "trace_id", None)
    detail = "An unexpected error occurred."
    if trace_id:
        detail = f"{detail} Trace ID: {trace_id}"

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal.Unexpected",
        detail,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
