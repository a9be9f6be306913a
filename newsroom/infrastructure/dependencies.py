"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.config import get_settings
from newsroom.application.services import ArticleQueryBuilder, ArticleService
from newsroom.infrastructure.database.session import get_db_session
from newsroom.infrastructure.database.repositories import SQLAlchemyArticleRepository
from newsroom.infrastructure.security import SessionCsrfTokenManager


def get_csrf_manager(request: Request) -> SessionCsrfTokenManager:
    """Token manager bound to the caller's session cookie."""
    settings = get_settings()
    return SessionCsrfTokenManager(settings.secret_key, request.session)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
    csrf: SessionCsrfTokenManager = Depends(get_csrf_manager),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    settings = get_settings()
    repository = SQLAlchemyArticleRepository(
        session,
        timeout=settings.store_timeout_seconds,
        retry_attempts=settings.store_retry_attempts,
    )
    query_builder = ArticleQueryBuilder(search_published_only=settings.search_published_only)
    yield ArticleService(
        repository,
        query_builder,
        page_size=settings.page_size,
        csrf=csrf,
    )
