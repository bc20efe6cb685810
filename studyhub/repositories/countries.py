"""Country repository."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import Article, Country, University
from studyhub.db.session import atomic
from studyhub.repositories.base import (
    apply_changes,
    build_conditions,
    ensure_unique,
    flush_unique,
    get_one,
    guard_dependents,
    locale_columns,
    lock_row,
    paginate,
    search_clause,
)
from studyhub.schemas.common import Page
from studyhub.schemas.country import CountryCreate, CountryUpdate, GetCountriesInput

logger = logging.getLogger(__name__)


async def get_countries(session: AsyncSession, params: GetCountriesInput) -> Page:
    """List countries filtered by status and a search over names and slug."""
    conditions = build_conditions(
        Country.status == params.status if params.status else None,
        search_clause(params.search, [*locale_columns(Country, "name"), Country.slug]),
    )
    return await paginate(session, Country, conditions, params)


async def get_country_by_id(session: AsyncSession, country_id: int) -> Country | None:
    return await get_one(session, Country, Country.id == country_id)


async def get_country_by_slug(session: AsyncSession, slug: str) -> Country | None:
    return await get_one(session, Country, Country.slug == slug)


async def create_country(session: AsyncSession, data: CountryCreate) -> Country:
    async with atomic(session):
        await ensure_unique(session, Country, "slug", data.slug)
        country = Country(**data.model_dump())
        session.add(country)
        await flush_unique(session, "Country", "slug", country.slug)

    logger.info(f"Created country {country.id} ({country.slug})")
    return country


async def update_country(session: AsyncSession, data: CountryUpdate) -> Country | None:
    changes = data.changes()
    async with atomic(session):
        country = await get_one(session, Country, Country.id == data.id)
        if not country:
            return None
        if "slug" in changes:
            await ensure_unique(session, Country, "slug", changes["slug"], exclude_id=data.id)
        apply_changes(country, changes)
        await flush_unique(session, "Country", "slug", country.slug)

    logger.info(f"Updated country {country.id}: {sorted(changes)}")
    return country


async def delete_country(session: AsyncSession, country_id: int) -> bool:
    """Delete a country that no university or article references.

    Raises:
        DependencyConflict: If universities or articles still point at it.
    """
    async with atomic(session):
        country = await lock_row(session, Country, country_id)
        if not country:
            return False
        await guard_dependents(
            session,
            "Country",
            [
                ("universities", University, University.country_id == country_id),
                ("articles", Article, Article.country_id == country_id),
            ],
        )
        await session.delete(country)

    logger.info(f"Deleted country {country_id}")
    return True
