"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from newsroom.domain.entities import Article, ArticleFilter


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Every listing is ordered by id, newest first. Writes are flushed but only
    become durable on ``commit()``.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article regardless of publish state."""
        ...

    @abstractmethod
    async def find_where(self, criteria: ArticleFilter) -> list[Article]:
        """Retrieve all articles matching the filter."""
        ...

    @abstractmethod
    async def find_page(
        self, offset: int, limit: int, criteria: ArticleFilter | None = None
    ) -> list[Article]:
        """Retrieve at most ``limit`` matching articles, skipping ``offset``."""
        ...

    @abstractmethod
    async def count(self, criteria: ArticleFilter | None = None) -> int:
        """Count the articles matching the filter."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Write back the editable fields of an existing article."""
        ...

    @abstractmethod
    async def delete(self, article: Article) -> None:
        """Remove an article permanently."""
        ...

    @abstractmethod
    async def increment_views(self, article_id: int) -> Article | None:
        """Atomically add one view. Returns None if the article does not exist."""
        ...

    @abstractmethod
    async def toggle_published(self, article_id: int) -> Article | None:
        """Atomically flip the publish flag. Returns None if the article does not exist."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make every pending change durable."""
        ...
