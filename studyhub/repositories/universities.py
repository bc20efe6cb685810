"""University repository."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import Country, University, UniversityMajor
from studyhub.db.session import atomic
from studyhub.repositories.base import (
    apply_changes,
    build_conditions,
    ensure_exists,
    ensure_unique,
    flush_unique,
    get_one,
    locale_columns,
    lock_row,
    newest_first,
    paginate,
    search_clause,
)
from studyhub.schemas.common import Page
from studyhub.schemas.university import GetUniversitiesInput, UniversityCreate, UniversityUpdate

logger = logging.getLogger(__name__)


async def get_universities(session: AsyncSession, params: GetUniversitiesInput) -> Page:
    conditions = build_conditions(
        University.country_id == params.country_id if params.country_id is not None else None,
        University.status == params.status if params.status else None,
        search_clause(params.search, [*locale_columns(University, "name"), University.slug]),
    )
    return await paginate(session, University, conditions, params)


async def get_university_by_id(session: AsyncSession, university_id: int) -> University | None:
    return await get_one(session, University, University.id == university_id)


async def get_university_by_slug(session: AsyncSession, slug: str) -> University | None:
    return await get_one(session, University, University.slug == slug)


async def get_universities_by_country(session: AsyncSession, country_id: int) -> list[University]:
    result = await session.execute(
        select(University)
        .where(University.country_id == country_id)
        .order_by(*newest_first(University))
    )
    return list(result.scalars().all())


async def create_university(session: AsyncSession, data: UniversityCreate) -> University:
    """Create a university under an existing country.

    Raises:
        ReferentialIntegrityError: If ``country_id`` does not exist.
        UniquenessViolation: If the slug is taken.
    """
    async with atomic(session):
        await ensure_exists(session, Country, data.country_id)
        await ensure_unique(session, University, "slug", data.slug)
        university = University(**data.model_dump())
        session.add(university)
        await flush_unique(session, "University", "slug", university.slug)

    logger.info(f"Created university {university.id} ({university.slug})")
    return university


async def update_university(session: AsyncSession, data: UniversityUpdate) -> University | None:
    changes = data.changes()
    async with atomic(session):
        university = await get_one(session, University, University.id == data.id)
        if not university:
            return None
        if "country_id" in changes:
            await ensure_exists(session, Country, changes["country_id"])
        if "slug" in changes:
            await ensure_unique(session, University, "slug", changes["slug"], exclude_id=data.id)
        apply_changes(university, changes)
        await flush_unique(session, "University", "slug", university.slug)

    logger.info(f"Updated university {university.id}: {sorted(changes)}")
    return university


async def delete_university(session: AsyncSession, university_id: int) -> bool:
    """Delete a university together with the majors it offers."""
    async with atomic(session):
        university = await lock_row(session, University, university_id)
        if not university:
            return False
        # Explicit for backends that do not enforce ON DELETE CASCADE
        await session.execute(
            delete(UniversityMajor).where(UniversityMajor.university_id == university_id)
        )
        await session.delete(university)

    logger.info(f"Deleted university {university_id}")
    return True
