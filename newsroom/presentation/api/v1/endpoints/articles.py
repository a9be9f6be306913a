"""Article endpoints — listing, search, forms, publish toggle and deletion."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse

from newsroom.application.schemas import (
    ArticleCreate,
    ArticleDetailResponse,
    ArticleFormResponse,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
    ValidationErrorResponse,
    validate_article_form,
)
from newsroom.application.services import ArticleService
from newsroom.domain.exceptions import EntityNotFoundError, ForbiddenError
from newsroom.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/article", tags=["Articles"])


def _redirect_to_index(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=str(request.url_for("list_articles")),
        status_code=status.HTTP_303_SEE_OTHER,
    )


_FORM_FIELDS = ("title", "content", "published")


async def _submitted_form(request: Request) -> dict[str, str]:
    """Article fields present in the posted form, empty strings included."""
    form = await request.form()
    submitted: dict[str, str] = {}
    for name in _FORM_FIELDS:
        value = form.get(name)
        if isinstance(value, str):
            submitted[name] = value
    return submitted


@router.get("/", response_model=ArticleListResponse)
async def list_articles(
    q: str | None = Query(None, max_length=255, description="Search term over title and content"),
    page: int = Query(1, ge=1),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """Published articles, paginated — or every match when ``q`` is given."""
    result = await service.browse(q, page)
    return ArticleListResponse(
        items=[ArticleResponse.model_validate(a, from_attributes=True) for a in result.items],
        search_term=result.search_term,
        current_page=result.page,
        total_pages=result.total_pages,
        total_count=result.total_count,
    )


@router.get("/admin", response_model=list[ArticleResponse])
async def admin_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Every article, published or not."""
    articles = await service.list_all()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/new", response_model=ArticleFormResponse)
async def new_article_form() -> ArticleFormResponse:
    return ArticleFormResponse()


@router.post(
    "/new",
    status_code=status.HTTP_303_SEE_OTHER,
    responses={422: {"model": ValidationErrorResponse}},
)
async def create_article(
    request: Request,
    form: dict[str, str] = Depends(_submitted_form),
    service: ArticleService = Depends(get_article_service),
) -> RedirectResponse:
    """Create an article from a submitted form, then go back to the index."""
    data = validate_article_form(form, ArticleCreate)
    await service.create_article(data)
    return _redirect_to_index(request)


@router.get("/historique", response_model=list[ArticleResponse])
async def article_history(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Unpublished articles (drafts and withdrawn ones)."""
    articles = await service.list_unpublished()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def show_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleDetailResponse:
    """Retrieve a single article and count the view."""
    try:
        article = await service.get_for_display(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleDetailResponse.model_validate(
        {**asdict(article), "delete_token": service.delete_token_for(article_id)}
    )


@router.get("/{article_id}/edit", response_model=ArticleFormResponse)
async def edit_article_form(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleFormResponse:
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleFormResponse.model_validate(article, from_attributes=True)


@router.post(
    "/{article_id}/edit",
    status_code=status.HTTP_303_SEE_OTHER,
    responses={422: {"model": ValidationErrorResponse}},
)
async def update_article(
    article_id: int,
    request: Request,
    form: dict[str, str] = Depends(_submitted_form),
    service: ArticleService = Depends(get_article_service),
) -> RedirectResponse:
    """Rebind the article from the submitted form.

    An unchecked ``published`` box is not sent and means unpublished; an
    omitted title or content keeps its value, an empty one is rejected.
    """
    try:
        await service.get_article(article_id)
        data = validate_article_form({"published": "false", **form}, ArticleUpdate)
        await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _redirect_to_index(request)


@router.post("/{article_id}/toggle", status_code=status.HTTP_303_SEE_OTHER)
async def toggle_article(
    article_id: int,
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> RedirectResponse:
    """Flip the published flag."""
    try:
        await service.toggle_published(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _redirect_to_index(request)


@router.post("/{article_id}", status_code=status.HTTP_303_SEE_OTHER)
async def delete_article(
    article_id: int,
    request: Request,
    token: str | None = Form(None, alias="_token"),
    service: ArticleService = Depends(get_article_service),
) -> RedirectResponse:
    """Delete an article; the form must carry the token issued by the show endpoint."""
    try:
        await service.delete_article(article_id, token)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return _redirect_to_index(request)
