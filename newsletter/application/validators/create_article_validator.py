"""Validator for the CreateArticle command.

Rules:
- title must not be empty
- content must not be empty
- tags are unconstrained

Every rule runs; failures are collected rather than stopping at the first one.
"""

from dataclasses import dataclass, field

from newsletter.application.commands.article_commands import CreateArticle
from newsletter.core.errors import ValidationError
from newsletter.core.result import Failure
from newsletter.core.validation import validate_not_empty


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Aggregate outcome of validating a command.

    Attributes:
        errors: Field failures, in rule order.
    """

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        """Join every failure message, one per line."""
        return "\n".join(error.message for error in self.errors)


class CreateArticleValidator:
    """Field-level precondition checks for CreateArticle."""

    def validate(self, cmd: CreateArticle) -> ValidationResult:
        """Validate a CreateArticle command.

        Args:
            cmd: Command to check.

        Returns:
            ValidationResult holding zero or more field failures.
        """
        checks = (
            validate_not_empty(cmd.title, "Title"),
            validate_not_empty(cmd.content, "Content"),
        )
        return ValidationResult(
            errors=[check.error for check in checks if isinstance(check, Failure)]
        )
