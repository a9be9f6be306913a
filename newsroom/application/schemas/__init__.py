from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleDetailResponse,
    ArticleFormResponse,
    ArticleListResponse,
    FieldErrorResponse,
    ValidationErrorResponse,
    validate_article_form,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleDetailResponse",
    "ArticleFormResponse",
    "ArticleListResponse",
    "FieldErrorResponse",
    "ValidationErrorResponse",
    "validate_article_form",
]
