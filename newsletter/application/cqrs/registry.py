"""CQRS Registry - Single Source of Truth for Commands.

This registry catalogs ALL commands in the system with their metadata.
Used for:
- Container wiring (dispatcher handler table)
- Startup verification (exactly one handler per command type)
- Validation tests (verify no drift between commands/handlers)

Adding new commands:
1. Define command dataclass in the appropriate *_commands.py file
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

import inspect

from newsletter.application.commands.article_commands import CreateArticle
from newsletter.application.commands.handlers.create_article_handler import (
    CreateArticleHandler,
)
from newsletter.application.cqrs.metadata import CommandMetadata, CQRSCategory


class CommandRegistryError(Exception):
    """Registry is inconsistent (startup configuration fault)."""


# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateArticle,
        handler_class=CreateArticleHandler,
        category=CQRSCategory.ARTICLES,
        description="Create a newsletter article and return its id",
    ),
]


def get_all_commands() -> list[type]:
    """Return every registered command class."""
    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_handler_for_command(command_class: type) -> type | None:
    """Return the handler class registered for a command class, if any."""
    for meta in COMMAND_REGISTRY:
        if meta.command_class is command_class:
            return meta.handler_class
    return None


def verify_command_registry(
    registry: list[CommandMetadata] | None = None,
) -> None:
    """Check that every command has exactly one usable handler.

    Called once at application startup so wiring mistakes fail fast.

    Args:
        registry: Registry to verify (defaults to COMMAND_REGISTRY).

    Raises:
        CommandRegistryError: Duplicate command type, or a handler without
            an async ``handle`` method.
    """
    entries = COMMAND_REGISTRY if registry is None else registry
    seen: set[type] = set()

    for meta in entries:
        if meta.command_class in seen:
            raise CommandRegistryError(
                f"Command {meta.command_class.__name__} is registered more than once"
            )
        seen.add(meta.command_class)

        handle = getattr(meta.handler_class, "handle", None)
        if handle is None or not inspect.iscoroutinefunction(handle):
            raise CommandRegistryError(
                f"Handler {meta.handler_class.__name__} must define async handle()"
            )
