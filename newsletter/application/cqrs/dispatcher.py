"""In-process command dispatcher (mediator).

Routes a command instance to the single handler registered for its type.
The handler table is built by the container from COMMAND_REGISTRY once per
request, so the dispatcher itself holds no shared mutable state.

Usage:
    dispatcher = Dispatcher({CreateArticle: create_article_handler})
    result = await dispatcher.send(CreateArticle(title="T", content="C"))
"""

from collections.abc import Mapping
from typing import Any, Protocol

from newsletter.core.result import Failure, Success, as_result


class CommandHandler(Protocol):
    """Anything with an async ``handle(command)`` method."""

    async def handle(self, cmd: Any) -> Any: ...


class HandlerNotFoundError(LookupError):
    """No handler is registered for a command type (configuration fault)."""

    def __init__(self, command_type: type) -> None:
        super().__init__(f"No handler registered for {command_type.__name__}")
        self.command_type = command_type


class Dispatcher:
    """Route commands to their registered handler."""

    def __init__(self, handlers: Mapping[type, CommandHandler]) -> None:
        """Initialize dispatcher with its handler table.

        Args:
            handlers: Command type to handler instance.
        """
        self._handlers = dict(handlers)

    def handler_for(self, command_type: type) -> CommandHandler:
        """Return the handler registered for a command type.

        Raises:
            HandlerNotFoundError: If none is registered.
        """
        try:
            return self._handlers[command_type]
        except KeyError:
            raise HandlerNotFoundError(command_type) from None

    async def send(self, command: Any) -> Success[Any] | Failure[Any]:
        """Dispatch a command and return the handler's result.

        Bare handler return values are wrapped in Success.

        Args:
            command: Command instance.

        Returns:
            The handler's Result.

        Raises:
            HandlerNotFoundError: If no handler is registered for the command type.
        """
        handler = self.handler_for(type(command))
        return as_result(await handler.handle(command))
