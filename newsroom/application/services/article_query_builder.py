"""Builds the filter predicates used by the article listings and search."""

from newsroom.domain.entities import ArticleFilter
from newsroom.domain.exceptions import FieldError, ValidationFailedError


class ArticleQueryBuilder:
    """Turns listing intents and free-text terms into ``ArticleFilter`` predicates.

    Search is a plain case-insensitive substring match over title and
    content; there is no ranking beyond the store's default order.
    """

    def __init__(self, search_published_only: bool = False):
        self._search_published_only = search_published_only

    @staticmethod
    def normalize_term(term: str | None) -> str | None:
        """Trim and collapse whitespace. Returns None when nothing is left."""
        if term is None:
            return None
        normalized = " ".join(term.split())
        return normalized or None

    def published(self) -> ArticleFilter:
        return ArticleFilter(published=True)

    def unpublished(self) -> ArticleFilter:
        return ArticleFilter(published=False)

    def everything(self) -> ArticleFilter:
        return ArticleFilter()

    def search(self, term: str | None) -> ArticleFilter:
        normalized = self.normalize_term(term)
        if normalized is None:
            raise ValidationFailedError([FieldError("q", "Search term must not be empty")])
        return ArticleFilter(
            published=True if self._search_published_only else None,
            term=normalized,
        )
