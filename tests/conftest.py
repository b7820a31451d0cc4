"""Pytest configuration.

Settings are built when ``newsletter.core.config`` is first imported, so the
environment is prepared here before any test module imports the package.

Database fixtures use a throwaway SQLite file per test (aiosqlite driver).
The engine uses NullPool, so the same Database can be driven from the test's
own event loop and from the TestClient's loop.
"""

import asyncio
import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy import func, select

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="newsletter-tests-"))

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'newsletter.db'}"
)

from newsletter.infrastructure.persistence.database import Database  # noqa: E402
from newsletter.infrastructure.persistence.models.article import (  # noqa: E402
    Article as ArticleModel,
)


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh database with the schema created.

    Yields:
        Database: Database bound to a temporary SQLite file.
    """
    db = Database(database_url=_sqlite_url(tmp_path / "test.db"))
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def sync_database(tmp_path):
    """Provide a fresh database for synchronous (TestClient) tests.

    Setup and teardown run on short-lived event loops of their own.
    """
    db = Database(database_url=_sqlite_url(tmp_path / "api.db"))
    asyncio.run(db.create_all())
    yield db
    asyncio.run(db.close())


async def count_articles(db: Database) -> int:
    """Return the number of stored articles."""
    async with db.get_session() as session:
        result = await session.execute(select(func.count()).select_from(ArticleModel))
        return result.scalar_one()


async def fetch_articles(db: Database) -> list[ArticleModel]:
    """Return every stored article row."""
    async with db.get_session() as session:
        result = await session.execute(select(ArticleModel))
        return list(result.scalars().all())
