"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from newsletter.core.enums import ErrorCode, Environment
"""

from newsletter.core.enums.environment import Environment
from newsletter.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
