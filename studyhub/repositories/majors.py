"""Major repository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import Article, Major, Status, UniversityMajor
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
    newest_first,
    paginate,
    search_clause,
)
from studyhub.schemas.common import Page
from studyhub.schemas.major import GetMajorsInput, MajorCreate, MajorUpdate

logger = logging.getLogger(__name__)


def _offered_at(university_id: int):
    """Condition: the major is offered by the given university."""
    return Major.id.in_(
        select(UniversityMajor.major_id).where(UniversityMajor.university_id == university_id)
    )


async def get_majors(session: AsyncSession, params: GetMajorsInput) -> Page:
    conditions = build_conditions(
        _offered_at(params.university_id) if params.university_id is not None else None,
        Major.status == params.status if params.status else None,
        search_clause(params.search, [*locale_columns(Major, "name"), Major.slug]),
    )
    return await paginate(session, Major, conditions, params)


async def get_major_by_id(session: AsyncSession, major_id: int) -> Major | None:
    return await get_one(session, Major, Major.id == major_id)


async def get_major_by_slug(session: AsyncSession, slug: str) -> Major | None:
    """Public lookup: inactive majors are treated as missing."""
    return await get_one(session, Major, Major.slug == slug, Major.status == Status.ACTIVE)


async def get_majors_by_university(session: AsyncSession, university_id: int) -> list[Major]:
    result = await session.execute(
        select(Major)
        .where(_offered_at(university_id), Major.status == Status.ACTIVE)
        .order_by(*newest_first(Major))
    )
    return list(result.scalars().all())


async def create_major(session: AsyncSession, data: MajorCreate) -> Major:
    async with atomic(session):
        await ensure_unique(session, Major, "slug", data.slug)
        major = Major(**data.model_dump())
        session.add(major)
        await flush_unique(session, "Major", "slug", major.slug)

    logger.info(f"Created major {major.id} ({major.slug})")
    return major


async def update_major(session: AsyncSession, data: MajorUpdate) -> Major | None:
    changes = data.changes()
    async with atomic(session):
        major = await get_one(session, Major, Major.id == data.id)
        if not major:
            return None
        if "slug" in changes:
            await ensure_unique(session, Major, "slug", changes["slug"], exclude_id=data.id)
        apply_changes(major, changes)
        await flush_unique(session, "Major", "slug", major.slug)

    logger.info(f"Updated major {major.id}: {sorted(changes)}")
    return major


async def delete_major(session: AsyncSession, major_id: int) -> bool:
    """Delete a major no university offers and no article mentions.

    Raises:
        DependencyConflict: If university_majors or articles reference it.
    """
    async with atomic(session):
        major = await lock_row(session, Major, major_id)
        if not major:
            return False
        await guard_dependents(
            session,
            "Major",
            [
                ("universities", UniversityMajor, UniversityMajor.major_id == major_id),
                ("articles", Article, Article.major_id == major_id),
            ],
        )
        await session.delete(major)

    logger.info(f"Deleted major {major_id}")
    return True
