"""Unit tests for CreateArticleValidator.

Tests cover:
- Valid commands (any tags)
- Empty/whitespace title and content
- Aggregation of every failure, in rule order
"""

import pytest

from newsletter.application.commands.article_commands import CreateArticle
from newsletter.application.validators.create_article_validator import (
    CreateArticleValidator,
    ValidationResult,
)


@pytest.fixture
def validator():
    return CreateArticleValidator()


@pytest.mark.unit
class TestCreateArticleValidator:
    """Test CreateArticle validation rules."""

    @pytest.mark.parametrize("tags", [(), ("intro",), ("", "x", "x")])
    def test_valid_command_any_tags(self, validator, tags):
        """Tags are unconstrained."""
        result = validator.validate(
            CreateArticle(title="Hello", content="World", tags=tags)
        )

        assert result.is_valid
        assert result.errors == []
        assert str(result) == ""

    def test_empty_title_fails(self, validator):
        result = validator.validate(CreateArticle(title="", content="World"))

        assert not result.is_valid
        assert [e.field for e in result.errors] == ["Title"]
        assert "'Title' must not be empty." in str(result)

    def test_whitespace_content_fails(self, validator):
        result = validator.validate(CreateArticle(title="T", content="   "))

        assert [e.field for e in result.errors] == ["Content"]

    def test_all_failures_collected(self, validator):
        """Both rules run even when the first one fails."""
        result = validator.validate(CreateArticle())

        assert [e.field for e in result.errors] == ["Title", "Content"]
        assert str(result) == (
            "'Title' must not be empty.\n'Content' must not be empty."
        )


@pytest.mark.unit
def test_empty_validation_result_is_valid():
    assert ValidationResult().is_valid is True
