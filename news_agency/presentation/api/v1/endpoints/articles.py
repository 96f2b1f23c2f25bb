"""Article CRUD endpoints.

Validation failures (ArticleValidationError) and database failures
(PersistenceError) are translated by the handlers registered in
``news_agency.main``.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from news_agency.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleStatisticsResponse,
    ArticleUpdate,
    FilterOptionsResponse,
    PublishedArticleResponse,
)
from news_agency.application.services import ArticleService
from news_agency.domain.entities import Article, ArticleStatus
from news_agency.domain.exceptions import EntityNotFoundError
from news_agency.infrastructure.dependencies import get_article_service

# async on purpose: the sync service then runs on the event loop, so requests
# reach the one shared Session one at a time. Do not move it to a threadpool.
router = APIRouter(prefix="/articles", tags=["Articles"])

FEATURED_COUNT = 3


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    region: str | None = None,
    language: str | None = None,
    status_filter: ArticleStatus | None = Query(None, alias="status"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve all articles, optionally filtered, newest first."""
    articles = service.list_articles(region=region, language=language, status=status_filter)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/published", response_model=list[PublishedArticleResponse])
async def list_published_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[PublishedArticleResponse]:
    """Public feed: published articles, the newest ones flagged as featured."""
    articles = service.list_published()
    return [
        PublishedArticleResponse.model_validate(a, from_attributes=True).model_copy(
            update={"featured": index < FEATURED_COUNT}
        )
        for index, a in enumerate(articles)
    ]


@router.get("/filters", response_model=FilterOptionsResponse)
async def get_filter_options(
    service: ArticleService = Depends(get_article_service),
) -> FilterOptionsResponse:
    """Distinct regions and languages for filter dropdowns."""
    regions, languages = service.get_filter_options()
    return FilterOptionsResponse(regions=regions, languages=languages)


@router.get("/search", response_model=list[ArticleResponse])
async def search_articles(
    q: str = Query(..., min_length=1),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Case-insensitive search in titles and content."""
    articles = service.search_articles(q)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/statistics", response_model=ArticleStatisticsResponse)
async def get_statistics(
    service: ArticleService = Depends(get_article_service),
) -> ArticleStatisticsResponse:
    """Article counts by status."""
    return ArticleStatisticsResponse(**service.get_statistics().as_dict())


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    fields = data.model_dump(exclude_none=True)
    created = service.create_article(Article(**fields))
    article = service.get_article(created.id)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article; omitted fields keep their value."""
    try:
        updated = service.apply_changes(article_id, **data.model_dump(exclude_none=True))
        article = service.get_article(updated.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
