from .article import Article
from .article_filter import ArticleFilter
from .article_page import ArticlePage

__all__ = [
    "Article",
    "ArticleFilter",
    "ArticlePage",
]
