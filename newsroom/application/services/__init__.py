from .article_query_builder import ArticleQueryBuilder
from .article_service import ArticleService

__all__ = [
    "ArticleQueryBuilder",
    "ArticleService",
]
