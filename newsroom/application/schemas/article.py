"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from newsroom.domain.exceptions import FieldError, ValidationFailedError


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    content: str = Field(..., min_length=1, examples=["This is the body of the article."])
    published: bool = False

    model_config = {"str_strip_whitespace": True}


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    published: bool | None = None

    model_config = {"str_strip_whitespace": True}


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    published: bool
    views: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleDetailResponse(ArticleResponse):
    """Single article plus the token required to delete it from this session."""

    delete_token: str


class ArticleFormResponse(BaseModel):
    """Values to pre-fill the create/edit form with."""

    id: int | None = None
    title: str = ""
    content: str = ""
    published: bool = False

    model_config = {"from_attributes": True}


class ArticleListResponse(BaseModel):
    """One page of the public listing, or the full result of a search."""

    items: list[ArticleResponse]
    search_term: str | None = None
    current_page: int
    total_pages: int
    total_count: int


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: str
    errors: list[FieldErrorResponse]


SchemaT = TypeVar("SchemaT", ArticleCreate, ArticleUpdate)


def validate_article_form(raw: Mapping[str, Any], schema: type[SchemaT]) -> SchemaT:
    """Validate a submitted article form against ``ArticleCreate`` or ``ArticleUpdate``.

    Raises ``ValidationFailedError`` listing every failing field. Keys whose
    value is ``None`` count as not submitted.
    """
    submitted = {key: value for key, value in raw.items() if value is not None}
    try:
        return schema.model_validate(submitted)
    except ValidationError as exc:
        errors = [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "__root__",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        raise ValidationFailedError(errors) from exc
