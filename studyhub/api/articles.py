"""Article API routes. Public listings only ever return active articles."""

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, page_of, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import articles
from studyhub.schemas.article import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    GetArticlesInput,
)
from studyhub.schemas.common import Page

router = APIRouter()


@router.get("/", response_model=Page[ArticleResponse])
async def list_articles(params: GetArticlesInput = Depends(), db: AsyncSession = Depends(get_db)):
    return page_of(await articles.get_articles(db, params), ArticleResponse)


@router.get("/featured", response_model=list[ArticleResponse])
async def list_featured_articles(
    limit: int = Query(default=articles.DEFAULT_FEATURED_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    return await articles.get_featured_articles(db, limit)


@router.get("/slug/{slug}", response_model=ArticleResponse)
async def get_article_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    return found(await articles.get_article_by_slug(db, slug), "Article")


@router.get("/by-country/{country_id}", response_model=list[ArticleResponse])
async def list_articles_by_country(
    country_id: int,
    limit: int | None = Query(default=None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    return await articles.get_articles_by_country(db, country_id, limit)


@router.get("/by-major/{major_id}", response_model=list[ArticleResponse])
async def list_articles_by_major(
    major_id: int,
    limit: int | None = Query(default=None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    return await articles.get_articles_by_major(db, major_id, limit)


@router.get("/{article_id}/related", response_model=list[ArticleResponse])
async def list_related_articles(
    article_id: int,
    limit: int = Query(default=articles.DEFAULT_RELATED_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    return await articles.get_related_articles(db, article_id, limit)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: int, db: AsyncSession = Depends(get_db)):
    return found(await articles.get_article_by_id(db, article_id), "Article")


@router.post("/", response_model=ArticleResponse, status_code=201)
async def create_article(data: ArticleCreate, db: AsyncSession = Depends(get_db)):
    return await articles.create_article(db, data)


@router.patch("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)
):
    data = patch_input(ArticleUpdate, body, id=article_id)
    return found(await articles.update_article(db, data), "Article")


@router.delete("/{article_id}")
async def delete_article(article_id: int, db: AsyncSession = Depends(get_db)):
    return deleted(await articles.delete_article(db, article_id), "Article")
