"""Container module - Centralized dependency injection.

All factory functions are re-exported here:

    from newsletter.core.container import get_db_session, get_dispatcher, ...

The container is organized into modules:
- infrastructure: Core services (database, session, logging, validators)
- handler_factory: Type-hint driven handler wiring
- dispatcher: Request-scoped command dispatcher
"""

from newsletter.core.container.infrastructure import (
    get_create_article_validator,
    get_database,
    get_db_session,
    get_logger,
)
from newsletter.core.container.handler_factory import create_handler
from newsletter.core.container.dispatcher import get_dispatcher

__all__ = [
    "create_handler",
    "get_create_article_validator",
    "get_database",
    "get_db_session",
    "get_dispatcher",
    "get_logger",
]
