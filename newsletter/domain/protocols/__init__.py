"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from newsletter.domain.protocols import ArticleRepository, UnitOfWork
"""

from newsletter.domain.protocols.article_repository import ArticleRepository
from newsletter.domain.protocols.logger_protocol import LoggerProtocol
from newsletter.domain.protocols.unit_of_work import UnitOfWork

__all__ = [
    "ArticleRepository",
    "LoggerProtocol",
    "UnitOfWork",
]
