"""API routers.

Resources:
    /api/articles - Article management
"""

from fastapi import APIRouter

from newsletter.core.config import settings
from newsletter.presentation.api.articles import router as articles_router

# Combined API router
api_router = APIRouter(prefix=settings.api_prefix)

api_router.include_router(articles_router)

__all__ = [
    "api_router",
    "articles_router",
]
