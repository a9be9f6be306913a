"""Application service (use case) for Article operations."""

import logging

from newsroom.application.interfaces import ArticleRepository, CsrfTokenValidator
from newsroom.application.schemas import ArticleCreate, ArticleUpdate
from newsroom.application.services.article_query_builder import ArticleQueryBuilder
from newsroom.domain.entities import Article, ArticlePage
from newsroom.domain.exceptions import (
    EntityNotFoundError,
    FieldError,
    ForbiddenError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 6


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Each mutating use case ends with exactly one ``commit()`` on the
    repository; reads never commit.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        query_builder: ArticleQueryBuilder | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        csrf: CsrfTokenValidator | None = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._repository = repository
        self._queries = query_builder or ArticleQueryBuilder()
        self._page_size = page_size
        self._csrf = csrf

    @property
    def page_size(self) -> int:
        return self._page_size

    # ── Listings ─────────────────────────────────────────────────────

    async def list_published(self, page: int = 1, page_size: int | None = None) -> ArticlePage:
        size = self._page_size if page_size is None else page_size
        if page < 1:
            raise ValidationFailedError([FieldError("page", "Page must be a positive integer")])
        if size < 1:
            raise ValidationFailedError([FieldError("page_size", "Page size must be a positive integer")])

        criteria = self._queries.published()
        items = await self._repository.find_page((page - 1) * size, size, criteria)
        total = await self._repository.count(criteria)
        return ArticlePage(items=items, total_count=total, page=page, page_size=size)

    async def search(self, term: str) -> list[Article]:
        criteria = self._queries.search(term)
        return await self._repository.find_where(criteria)

    async def browse(self, term: str | None = None, page: int = 1) -> ArticlePage:
        """Public index: full search result when a term is given, else a page of published articles."""
        normalized = self._queries.normalize_term(term)
        if normalized is None:
            return await self.list_published(page)

        items = await self.search(normalized)
        return ArticlePage(
            items=items,
            total_count=len(items),
            page=page,
            page_size=self._page_size,
            search_term=normalized,
        )

    async def list_all(self) -> list[Article]:
        return await self._repository.get_all()

    async def list_unpublished(self) -> list[Article]:
        return await self._repository.find_where(self._queries.unpublished())

    # ── Single article ───────────────────────────────────────────────

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_for_display(self, article_id: int) -> Article:
        """Fetch an article for reading and count the view."""
        article = await self._repository.increment_views(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        await self._repository.commit()
        return article

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(title=data.title, content=data.content, published=data.published)
        created = await self._repository.create(article)
        await self._repository.commit()
        logger.info("Created article %s (published=%s)", created.id, created.published)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        article.update(title=data.title, content=data.content, published=data.published)
        updated = await self._repository.update(article)
        await self._repository.commit()
        logger.info("Updated article %s", article_id)
        return updated

    async def toggle_published(self, article_id: int) -> Article:
        article = await self._repository.toggle_published(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        await self._repository.commit()
        logger.info("Article %s is now %s", article_id, "published" if article.published else "unpublished")
        return article

    # ── Deletion ─────────────────────────────────────────────────────

    @staticmethod
    def delete_token_id(article_id: int) -> str:
        return f"delete{article_id}"

    def delete_token_for(self, article_id: int) -> str:
        return self._require_csrf().generate(self.delete_token_id(article_id))

    async def delete_article(self, article_id: int, token: str | None) -> None:
        article = await self.get_article(article_id)
        if not self._require_csrf().is_valid(self.delete_token_id(article_id), token):
            logger.warning("Rejected delete of article %s: invalid token", article_id)
            raise ForbiddenError("delete", article_id)

        await self._repository.delete(article)
        await self._repository.commit()
        logger.info("Deleted article %s", article_id)

    def _require_csrf(self) -> CsrfTokenValidator:
        if self._csrf is None:
            raise RuntimeError("ArticleService was built without a CSRF token validator")
        return self._csrf
