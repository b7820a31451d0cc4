"""Integration tests for Database session management.

Tests cover:
- Connection check
- Session commits on clean exit, rolls back on exception
- Cancellation discards staged rows
- Schema creation and teardown
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import inspect

from newsletter.infrastructure.persistence.database import Database
from newsletter.infrastructure.persistence.models.article import (
    Article as ArticleModel,
)
from tests.conftest import count_articles, fetch_articles


def make_row() -> ArticleModel:
    return ArticleModel(id=uuid4(), title="T", content="C", tags=["a", "b"])


@pytest.mark.integration
class TestDatabase:
    """Test Database against a temporary SQLite file."""

    @pytest.mark.asyncio
    async def test_check_connection(self, test_database):
        assert await test_database.check_connection() is True

    @pytest.mark.asyncio
    async def test_session_commits_on_exit(self, test_database):
        async with test_database.get_session() as session:
            session.add(make_row())

        rows = await fetch_articles(test_database)
        assert len(rows) == 1
        assert rows[0].tags == ["a", "b"]
        assert rows[0].created_on_utc is not None

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                session.add(make_row())
                await session.flush()
                raise RuntimeError("request failed")

        assert await count_articles(test_database) == 0

    @pytest.mark.asyncio
    async def test_create_and_drop_all(self, tmp_path):
        db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'schema.db'}")

        await db.create_all()
        async with db.engine.connect() as conn:
            tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
        assert "articles" in tables

        await db.drop_all()
        async with db.engine.connect() as conn:
            tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
        assert "articles" not in tables

        await db.close()


@pytest.mark.integration
class TestDatabaseCancellation:
    """A cancelled request never commits."""

    @pytest.mark.asyncio
    async def test_cancelled_session_discards_staged_rows(self, test_database):
        staged = asyncio.Event()

        async def request() -> None:
            async with test_database.get_session() as session:
                session.add(make_row())
                await session.flush()
                staged.set()
                await asyncio.Event().wait()

        task = asyncio.create_task(request())
        await staged.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert await count_articles(test_database) == 0

    @pytest.mark.asyncio
    async def test_cancellation_raised_inside_session(self, test_database):
        with pytest.raises(asyncio.CancelledError):
            async with test_database.get_session() as session:
                session.add(make_row())
                raise asyncio.CancelledError

        assert await count_articles(test_database) == 0
