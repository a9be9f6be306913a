"""Article filter predicate shared by the in-memory and SQL stores."""

from dataclasses import dataclass

from .article import Article


@dataclass(frozen=True)
class ArticleFilter:
    """Conjunction of an optional publish-state check and an optional text match.

    ``term`` matches when it is a case-insensitive substring of the title OR
    of the content. ``None`` fields do not restrict the result.
    """

    published: bool | None = None
    term: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.published is None and not self.term

    def matches(self, article: Article) -> bool:
        if self.published is not None and article.published != self.published:
            return False
        if self.term:
            needle = self.term.casefold()
            return needle in article.title.casefold() or needle in article.content.casefold()
        return True
