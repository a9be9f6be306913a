from .article_repository import ArticleRepository
from .csrf_token_validator import CsrfTokenValidator

__all__ = [
    "ArticleRepository",
    "CsrfTokenValidator",
]
