"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import ColumnElement, Select, func, not_, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.interfaces import ArticleRepository
from newsroom.domain.entities import Article, ArticleFilter
from newsroom.infrastructure.database.models import ArticleModel
from newsroom.infrastructure.database.resilience import store_call

_LIKE_ESCAPE = "\\"


def _like_pattern(term: str) -> str:
    """Wrap a literal term in % wildcards, escaping LIKE metacharacters."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def filter_clauses(criteria: ArticleFilter | None) -> list[ColumnElement[bool]]:
    """Compile an ArticleFilter into SQL WHERE clauses (ANDed by the caller)."""
    if criteria is None:
        return []
    clauses: list[ColumnElement[bool]] = []
    if criteria.published is not None:
        clauses.append(ArticleModel.published.is_(criteria.published))
    if criteria.term:
        pattern = _like_pattern(criteria.term)
        clauses.append(
            or_(
                ArticleModel.title.ilike(pattern, escape=_LIKE_ESCAPE),
                ArticleModel.content.ilike(pattern, escape=_LIKE_ESCAPE),
            )
        )
    return clauses


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        timeout: float = 5.0,
        retry_attempts: int = 1,
    ):
        self._session = session
        self.store_timeout = timeout
        self.store_retry_attempts = retry_attempts

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            published=model.published,
            views=model.views,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            published=entity.published,
            views=entity.views,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _select(self, criteria: ArticleFilter | None = None) -> Select[tuple[ArticleModel]]:
        return (
            select(ArticleModel)
            .where(*filter_clauses(criteria))
            .order_by(ArticleModel.id.desc())
        )

    async def _list(self, stmt: Select[tuple[ArticleModel]]) -> list[Article]:
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def _reload(self, article_id: int) -> Article | None:
        model = await self._session.get(ArticleModel, article_id, populate_existing=True)
        return self._to_entity(model) if model else None

    async def recover(self) -> None:
        """Discard the failed transaction so the next attempt starts clean."""
        await self._session.rollback()

    # ── Reads ────────────────────────────────────────────────────────

    @store_call("get_by_id", retryable=True)
    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    @store_call("get_all", retryable=True)
    async def get_all(self) -> list[Article]:
        return await self._list(self._select())

    @store_call("find_where", retryable=True)
    async def find_where(self, criteria: ArticleFilter) -> list[Article]:
        return await self._list(self._select(criteria))

    @store_call("find_page", retryable=True)
    async def find_page(
        self, offset: int, limit: int, criteria: ArticleFilter | None = None
    ) -> list[Article]:
        return await self._list(self._select(criteria).offset(offset).limit(limit))

    @store_call("count", retryable=True)
    async def count(self, criteria: ArticleFilter | None = None) -> int:
        stmt = select(func.count()).select_from(ArticleModel).where(*filter_clauses(criteria))
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    # ── Writes ───────────────────────────────────────────────────────

    @store_call("create")
    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    @store_call("update")
    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.content = article.content
        model.published = article.published
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    @store_call("delete")
    async def delete(self, article: Article) -> None:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()

    @store_call("increment_views")
    async def increment_views(self, article_id: int) -> Article | None:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(views=ArticleModel.views + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self._reload(article_id)

    @store_call("toggle_published")
    async def toggle_published(self, article_id: int) -> Article | None:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(
                published=not_(ArticleModel.published),
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self._reload(article_id)

    @store_call("commit")
    async def commit(self) -> None:
        await self._session.commit()
