"""Unit tests for handler_factory module.

Tests the automatic dependency injection system for CQRS handlers.

Test Strategy:
- Unit tests with a mocked session
- Test each function in isolation
- Cover error paths and edge cases
"""

from typing import Protocol
from unittest.mock import MagicMock

import pytest

from newsletter.application.commands.handlers.create_article_handler import (
    CreateArticleHandler,
)
from newsletter.application.validators.create_article_validator import (
    CreateArticleValidator,
)
from newsletter.core.container.handler_factory import (
    REPOSITORY_TYPES,
    SINGLETON_TYPES,
    analyze_handler_dependencies,
    create_handler,
    get_supported_dependencies,
    get_type_name,
)
from newsletter.infrastructure.persistence.repositories import ArticleRepository
from newsletter.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


# =============================================================================
# Test Fixtures - Mock Handler Classes
# =============================================================================


class MockNotifierProtocol(Protocol):
    """Mock singleton protocol for testing."""

    async def notify(self, message: str) -> None: ...


class SimpleHandler:
    """Handler with no dependencies."""

    def __init__(self) -> None:
        pass

    async def handle(self, cmd: object) -> str:
        return "success"


class OptionalDependencyHandler:
    """Handler with an optional unknown dependency."""

    def __init__(self, clock: "MockClock | None" = None) -> None:
        self.clock = clock

    async def handle(self, cmd: object) -> str:
        return "success"


class UnresolvableHandler:
    """Handler whose dependency is not known to the container."""

    def __init__(self, clock: "MockClock") -> None:
        self.clock = clock

    async def handle(self, cmd: object) -> str:
        return "success"


class MockClock:
    def now(self) -> int:
        return 0


@pytest.fixture
def session():
    return MagicMock()


# =============================================================================
# Test get_type_name
# =============================================================================


@pytest.mark.unit
class TestGetTypeName:
    """Tests for get_type_name() function."""

    def test_extracts_name_from_class(self) -> None:
        assert get_type_name(MockClock) == "MockClock"

    def test_extracts_name_from_string_annotation(self) -> None:
        assert get_type_name("module.ArticleRepository") == "ArticleRepository"

    def test_unwraps_optional(self) -> None:
        assert get_type_name(MockClock | None) == "MockClock"

    def test_none_annotation(self) -> None:
        assert get_type_name(None) == "None"


# =============================================================================
# Test analyze_handler_dependencies
# =============================================================================


@pytest.mark.unit
class TestAnalyzeHandlerDependencies:
    """Tests for analyze_handler_dependencies() function."""

    def test_no_dependencies(self) -> None:
        assert analyze_handler_dependencies(SimpleHandler) == {}

    def test_create_article_handler_dependencies(self) -> None:
        deps = analyze_handler_dependencies(CreateArticleHandler)

        assert {name: info["type_name"] for name, info in deps.items()} == {
            "article_repo": "ArticleRepository",
            "unit_of_work": "UnitOfWork",
            "validator": "CreateArticleValidator",
            "logger": "LoggerProtocol",
        }
        assert not any(info["is_optional"] for info in deps.values())

    def test_optional_dependency_detected(self) -> None:
        deps = analyze_handler_dependencies(OptionalDependencyHandler)

        assert deps["clock"]["is_optional"] is True
        assert deps["clock"]["type_name"] == "MockClock"


# =============================================================================
# Test create_handler
# =============================================================================


@pytest.mark.unit
class TestCreateHandler:
    """Tests for create_handler() function."""

    @pytest.mark.asyncio
    async def test_wires_create_article_handler(self, session) -> None:
        handler = await create_handler(CreateArticleHandler, session)

        assert isinstance(handler, CreateArticleHandler)
        assert isinstance(handler._article_repo, ArticleRepository)
        assert isinstance(handler._unit_of_work, SqlAlchemyUnitOfWork)
        assert isinstance(handler._validator, CreateArticleValidator)
        assert handler._article_repo._session is session
        assert handler._unit_of_work._session is session

    @pytest.mark.asyncio
    async def test_singletons_shared_between_handlers(self, session) -> None:
        first = await create_handler(CreateArticleHandler, session)
        second = await create_handler(CreateArticleHandler, MagicMock())

        assert first._validator is second._validator
        assert first._logger is second._logger
        assert first._article_repo is not second._article_repo

    @pytest.mark.asyncio
    async def test_overrides_take_precedence(self, session) -> None:
        logger = MagicMock()

        handler = await create_handler(CreateArticleHandler, session, logger=logger)

        assert handler._logger is logger

    @pytest.mark.asyncio
    async def test_simple_handler(self, session) -> None:
        handler = await create_handler(SimpleHandler, session)

        assert isinstance(handler, SimpleHandler)

    @pytest.mark.asyncio
    async def test_optional_unknown_dependency_is_none(self, session) -> None:
        handler = await create_handler(OptionalDependencyHandler, session)

        assert handler.clock is None

    @pytest.mark.asyncio
    async def test_unresolvable_dependency_raises(self, session) -> None:
        with pytest.raises(ValueError, match="Cannot resolve dependency 'clock'"):
            await create_handler(UnresolvableHandler, session)

    @pytest.mark.asyncio
    async def test_unknown_protocol_singleton_raises(self, session) -> None:
        class NotifyingHandler:
            def __init__(self, notifier: MockNotifierProtocol) -> None:
                self.notifier = notifier

        with pytest.raises(ValueError, match="Unknown singleton type"):
            await create_handler(NotifyingHandler, session)


@pytest.mark.unit
def test_supported_dependencies_cover_mappings() -> None:
    supported = get_supported_dependencies()

    assert supported["repositories"] == list(REPOSITORY_TYPES)
    assert supported["session_services"] == ["UnitOfWork"]
    assert supported["singletons"] == list(SINGLETON_TYPES)
