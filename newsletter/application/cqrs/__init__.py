"""CQRS registry, metadata and dispatcher."""

from newsletter.application.cqrs.dispatcher import Dispatcher, HandlerNotFoundError
from newsletter.application.cqrs.metadata import CommandMetadata, CQRSCategory
from newsletter.application.cqrs.registry import (
    COMMAND_REGISTRY,
    CommandRegistryError,
    verify_command_registry,
)

__all__ = [
    "COMMAND_REGISTRY",
    "CQRSCategory",
    "CommandMetadata",
    "CommandRegistryError",
    "Dispatcher",
    "HandlerNotFoundError",
    "verify_command_registry",
]
