"""One page of an article listing."""

import math
from dataclasses import dataclass, field

from .article import Article


@dataclass
class ArticlePage:
    """Slice of a listing plus the numbers needed to render a pager.

    When ``search_term`` is set the page holds the whole match set and
    ``total_count`` equals ``len(items)``.
    """

    items: list[Article] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 6
    search_term: str | None = None

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
