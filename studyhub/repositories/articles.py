"""Article repository."""

import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import Article, Country, Major, Status
from studyhub.db.session import atomic
from studyhub.repositories.base import (
    apply_changes,
    build_conditions,
    ensure_exists,
    ensure_unique,
    flush_unique,
    get_one,
    locale_columns,
    newest_first,
    paginate,
    search_clause,
)
from studyhub.schemas.article import ArticleCreate, ArticleUpdate, GetArticlesInput
from studyhub.schemas.common import Page

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 5
DEFAULT_RELATED_LIMIT = 5


async def _ensure_references(session: AsyncSession, country_id: int | None, major_id: int | None):
    if country_id is not None:
        await ensure_exists(session, Country, country_id)
    if major_id is not None:
        await ensure_exists(session, Major, major_id)


async def _active_articles(session: AsyncSession, *conditions, limit: int | None = None) -> list[Article]:
    query = (
        select(Article)
        .where(Article.status == Status.ACTIVE, *conditions)
        .order_by(*newest_first(Article))
    )
    if limit is not None:
        query = query.limit(limit)
    result = await session.execute(query)
    return list(result.scalars().all())


async def get_articles(session: AsyncSession, params: GetArticlesInput) -> Page:
    """List articles; search covers every title and content locale plus the slug."""
    conditions = build_conditions(
        Article.country_id == params.country_id if params.country_id is not None else None,
        Article.major_id == params.major_id if params.major_id is not None else None,
        Article.category == params.category if params.category else None,
        Article.status == params.status if params.status else None,
        Article.is_featured == params.is_featured if params.is_featured is not None else None,
        search_clause(
            params.search,
            [*locale_columns(Article, "title", "content"), Article.slug],
        ),
    )
    return await paginate(session, Article, conditions, params)


async def get_article_by_id(session: AsyncSession, article_id: int) -> Article | None:
    return await get_one(session, Article, Article.id == article_id)


async def get_article_by_slug(session: AsyncSession, slug: str) -> Article | None:
    """Public lookup: inactive articles are treated as missing."""
    return await get_one(session, Article, Article.slug == slug, Article.status == Status.ACTIVE)


async def get_featured_articles(
    session: AsyncSession, limit: int = DEFAULT_FEATURED_LIMIT
) -> list[Article]:
    return await _active_articles(session, Article.is_featured.is_(True), limit=limit)


async def get_related_articles(
    session: AsyncSession, article_id: int, limit: int = DEFAULT_RELATED_LIMIT
) -> list[Article]:
    """Active articles sharing the country or the major of ``article_id``."""
    article = await get_article_by_id(session, article_id)
    if not article:
        return []

    shared = []
    if article.country_id is not None:
        shared.append(Article.country_id == article.country_id)
    if article.major_id is not None:
        shared.append(Article.major_id == article.major_id)
    if not shared:
        return []

    return await _active_articles(session, Article.id != article_id, or_(*shared), limit=limit)


async def get_articles_by_country(
    session: AsyncSession, country_id: int, limit: int | None = None
) -> list[Article]:
    return await _active_articles(session, Article.country_id == country_id, limit=limit)


async def get_articles_by_major(
    session: AsyncSession, major_id: int, limit: int | None = None
) -> list[Article]:
    return await _active_articles(session, Article.major_id == major_id, limit=limit)


async def create_article(session: AsyncSession, data: ArticleCreate) -> Article:
    """Create an article, optionally tied to a country and/or a major.

    Raises:
        ReferentialIntegrityError: If a given country_id or major_id is missing.
        UniquenessViolation: If the slug is taken.
    """
    async with atomic(session):
        await _ensure_references(session, data.country_id, data.major_id)
        await ensure_unique(session, Article, "slug", data.slug)
        article = Article(**data.model_dump())
        session.add(article)
        await flush_unique(session, "Article", "slug", article.slug)

    logger.info(f"Created article {article.id} ({article.slug})")
    return article


async def update_article(session: AsyncSession, data: ArticleUpdate) -> Article | None:
    changes = data.changes()
    async with atomic(session):
        article = await get_one(session, Article, Article.id == data.id)
        if not article:
            return None
        await _ensure_references(session, changes.get("country_id"), changes.get("major_id"))
        if "slug" in changes:
            await ensure_unique(session, Article, "slug", changes["slug"], exclude_id=data.id)
        apply_changes(article, changes)
        await flush_unique(session, "Article", "slug", article.slug)

    logger.info(f"Updated article {article.id}: {sorted(changes)}")
    return article


async def delete_article(session: AsyncSession, article_id: int) -> bool:
    async with atomic(session):
        article = await get_one(session, Article, Article.id == article_id)
        if not article:
            return False
        await session.delete(article)

    logger.info(f"Deleted article {article_id}")
    return True
