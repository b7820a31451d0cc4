"""Dispatcher factory.

Builds the request-scoped Dispatcher from COMMAND_REGISTRY: one handler per
registered command, each wired by the handler factory against the request's
database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newsletter.application.cqrs.dispatcher import Dispatcher
from newsletter.application.cqrs.registry import COMMAND_REGISTRY
from newsletter.core.container.handler_factory import create_handler
from newsletter.core.container.infrastructure import get_db_session


async def get_dispatcher(
    session: AsyncSession = Depends(get_db_session),
) -> Dispatcher:
    """Get command dispatcher (request-scoped).

    Args:
        session: Request database session (injected).

    Returns:
        Dispatcher routing every registered command to its handler.

    Usage:
        # Presentation Layer (FastAPI Depends)
        dispatcher: Dispatcher = Depends(get_dispatcher)
        result = await dispatcher.send(command)

        # In tests
        app.dependency_overrides[get_dispatcher] = lambda: stub_dispatcher
    """
    handlers = {
        meta.command_class: await create_handler(meta.handler_class, session)
        for meta in COMMAND_REGISTRY
    }
    return Dispatcher(handlers)
