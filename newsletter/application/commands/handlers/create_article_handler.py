"""Create article handler.

Flow:
1. Validate the command (all rules, failures aggregated)
2. Build the Article entity (fresh id, verbatim fields, UTC timestamp)
3. Stage the article in the repository
4. Commit the unit of work
5. Return Success(article_id)

On failure:
- Validation: Failure(CreateArticle.Validation), nothing staged
- Storage: Failure(CreateArticle.Storage), unit of work rolled back

Architecture:
- Application layer ONLY imports from domain/core layers (entities, protocols)
- NO infrastructure imports (repository and unit of work are injected via protocols)
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from newsletter.application.commands.article_commands import CreateArticle
from newsletter.application.validators.create_article_validator import (
    CreateArticleValidator,
)
from newsletter.core.errors import DomainError, ErrorCode, ValidationError
from newsletter.core.result import Failure, Result, Success
from newsletter.domain.entities.article import Article
from newsletter.domain.protocols.article_repository import ArticleRepository
from newsletter.domain.protocols.logger_protocol import LoggerProtocol
from newsletter.domain.protocols.unit_of_work import UnitOfWork


class CreateArticleHandler:
    """Handler for the CreateArticle command.

    Orchestrates:
    - Command validation
    - Article construction
    - Persistence within the request's unit of work
    """

    def __init__(
        self,
        article_repo: ArticleRepository,
        unit_of_work: UnitOfWork,
        validator: CreateArticleValidator,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize create article handler with dependencies.

        Args:
            article_repo: Article repository for persistence.
            unit_of_work: Transaction scope of the current request.
            validator: CreateArticle validator.
            logger: Structured logger.
        """
        self._article_repo = article_repo
        self._unit_of_work = unit_of_work
        self._validator = validator
        self._logger = logger

    async def handle(self, cmd: CreateArticle) -> Result[UUID, DomainError]:
        """Handle create article command.

        Args:
            cmd: CreateArticle command.

        Returns:
            Success(article_id) when the article is durably stored.
            Failure(DomainError) on validation or storage failure.

        Side Effects:
            - Exactly one article row written on success, none on failure.
        """
        # Step 1: Validate
        validation = self._validator.validate(cmd)
        if not validation.is_valid:
            self._logger.warning(
                "Create article rejected",
                failed_fields=[error.field for error in validation.errors],
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.CREATE_ARTICLE_VALIDATION,
                    message=str(validation),
                )
            )

        # Step 2: Build entity
        article = Article(
            id=uuid4(),
            title=cmd.title,
            content=cmd.content,
            tags=list(cmd.tags),
            created_on_utc=datetime.now(UTC),
        )

        # Step 3: Stage
        await self._article_repo.add(article)

        # Step 4: Commit
        commit_result = await self._unit_of_work.commit()
        if isinstance(commit_result, Failure):
            self._logger.error(
                "Create article storage failure",
                article_id=str(article.id),
                storage_error=str(commit_result.error),
            )
            return Failure(
                error=DomainError(
                    code=ErrorCode.CREATE_ARTICLE_STORAGE,
                    message="The article could not be stored.",
                    details={"reason": commit_result.error.message},
                )
            )

        # Step 5: Return id
        self._logger.info("Article created", article_id=str(article.id))
        return Success(value=article.id)
