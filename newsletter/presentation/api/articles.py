"""Articles resource router.

Endpoints:
    POST /api/articles - Create article
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from newsletter.application.commands.article_commands import CreateArticle
from newsletter.application.cqrs.dispatcher import Dispatcher
from newsletter.core.container import get_dispatcher
from newsletter.core.result import Failure, Success
from newsletter.presentation.api.errors import ErrorResponseBuilder
from newsletter.schemas.article_schemas import CreateArticleRequest
from newsletter.schemas.error_schemas import ErrorResponse

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=str,
    responses={
        200: {"description": "Article created, body is its id"},
        400: {"description": "Validation failed", "model": ErrorResponse},
        500: {"description": "Article could not be stored", "model": ErrorResponse},
    },
    summary="Create article",
    description="Validate and store a new article. Returns the article id.",
)
async def create_article(
    data: CreateArticleRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> JSONResponse:
    """Create a new article.

    POST /api/articles → 200 OK

    Args:
        data: Article creation request (title, content, tags).
        dispatcher: Command dispatcher (injected).

    Returns:
        JSONResponse with the article id as a JSON string on success.
        JSONResponse with `{code, message}` on failure (400/500).
    """
    command = CreateArticle(
        title=data.title or "",
        content=data.content or "",
        tags=tuple(data.tags or ()),
    )
    result = await dispatcher.send(command)

    match result:
        case Success(value=article_id):
            return JSONResponse(status_code=status.HTTP_200_OK, content=str(article_id))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
