"""Error rendering for the HTTP layer.

Exports:
    ErrorResponseBuilder: Render domain errors as JSON responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from newsletter.presentation.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from newsletter.presentation.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
