"""Tests for the article repository."""

import asyncio

import pytest

from conftest import names
from studyhub.db.models import Status
from studyhub.errors import ReferentialIntegrityError
from studyhub.repositories import articles
from studyhub.schemas.article import ArticleCreate, ArticleUpdate, GetArticlesInput


@pytest.fixture
def make_article(session):
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        values = {**names("title", f"Article {n}"), "slug": f"article-{n}"}
        values.update(overrides)
        return await articles.create_article(session, ArticleCreate(**values))

    return _make


class TestArticleUpdate:
    @pytest.mark.asyncio
    async def test_status_only_update_keeps_everything_else(self, make_article, session):
        article = await make_article(content_en="Long read", category="guides")
        before = {
            column: getattr(article, column)
            for column in ("title_ar", "title_en", "title_tr", "title_ms", "slug", "content_en")
        }
        updated_before = article.updated_at
        await asyncio.sleep(0.01)

        updated = await articles.update_article(
            session, ArticleUpdate(id=article.id, status=Status.INACTIVE)
        )

        assert updated.status == Status.INACTIVE
        assert {column: getattr(updated, column) for column in before} == before
        assert updated.category == "guides"
        assert updated.updated_at > updated_before

    @pytest.mark.asyncio
    async def test_unknown_major_rejected(self, make_article, session):
        article = await make_article()

        with pytest.raises(ReferentialIntegrityError):
            await articles.update_article(session, ArticleUpdate(id=article.id, major_id=77))

    @pytest.mark.asyncio
    async def test_create_with_unknown_country_rejected(self, make_article):
        with pytest.raises(ReferentialIntegrityError):
            await make_article(country_id=12)


class TestArticleQueries:
    @pytest.mark.asyncio
    async def test_search_covers_content(self, make_article, session):
        await make_article(content_tr="İstanbul'da öğrenci yaşamı")
        await make_article(content_en="Kuala Lumpur housing")

        page = await articles.get_articles(session, GetArticlesInput(search="kuala"))
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_filters_combine(self, make_country, make_article, session):
        country = await make_country()
        await make_article(country_id=country.id, is_featured=True, category="visa")
        await make_article(country_id=country.id, category="visa")
        await make_article(is_featured=True, category="visa")

        page = await articles.get_articles(
            session,
            GetArticlesInput(country_id=country.id, is_featured=True, category="visa"),
        )
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_slug_lookup_hides_drafts(self, make_article, session):
        await make_article(slug="draft", status=Status.INACTIVE)

        assert await articles.get_article_by_slug(session, "draft") is None

    @pytest.mark.asyncio
    async def test_featured_articles_are_active_only(self, make_article, session):
        shown = await make_article(is_featured=True)
        await make_article(is_featured=True, status=Status.INACTIVE)
        await make_article()

        featured = await articles.get_featured_articles(session)
        assert [a.id for a in featured] == [shown.id]

    @pytest.mark.asyncio
    async def test_featured_limit(self, make_article, session):
        for _ in range(7):
            await make_article(is_featured=True)

        assert len(await articles.get_featured_articles(session)) == 5
        assert len(await articles.get_featured_articles(session, limit=2)) == 2

    @pytest.mark.asyncio
    async def test_related_share_country_or_major(
        self, make_country, make_major, make_article, session
    ):
        country = await make_country()
        major = await make_major()
        article = await make_article(country_id=country.id)
        same_country = await make_article(country_id=country.id, major_id=major.id)
        await make_article(major_id=major.id)
        await make_article()

        related = await articles.get_related_articles(session, article.id)
        assert [a.id for a in related] == [same_country.id]

    @pytest.mark.asyncio
    async def test_related_for_unlinked_or_missing_article(self, make_article, session):
        article = await make_article()

        assert await articles.get_related_articles(session, article.id) == []
        assert await articles.get_related_articles(session, 999) == []

    @pytest.mark.asyncio
    async def test_by_country_and_by_major(self, make_country, make_major, make_article, session):
        country = await make_country()
        major = await make_major()
        await make_article(country_id=country.id)
        await make_article(country_id=country.id, status=Status.INACTIVE)
        await make_article(major_id=major.id)

        assert len(await articles.get_articles_by_country(session, country.id)) == 1
        assert len(await articles.get_articles_by_major(session, major.id)) == 1

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, make_article, session):
        article = await make_article()

        assert await articles.delete_article(session, article.id) is True
        assert await articles.delete_article(session, article.id) is False
