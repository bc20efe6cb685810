"""University/major pairings, addressed by the (university_id, major_id) pair."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import Major, University, UniversityMajor
from studyhub.db.session import atomic
from studyhub.errors import UniquenessViolation
from studyhub.repositories.base import (
    apply_changes,
    count_where,
    ensure_exists,
    flush_unique,
    get_one,
    newest_first,
)
from studyhub.schemas.university_major import UniversityMajorCreate, UniversityMajorUpdate

logger = logging.getLogger(__name__)


def _pair(university_id: int, major_id: int) -> tuple:
    return (
        UniversityMajor.university_id == university_id,
        UniversityMajor.major_id == major_id,
    )


def _levels(levels) -> list[str]:
    # JSON column holds plain strings
    return [level.value for level in levels]


async def get_university_majors(session: AsyncSession, university_id: int) -> list[UniversityMajor]:
    """All majors offered by a university, with their details."""
    result = await session.execute(
        select(UniversityMajor)
        .where(UniversityMajor.university_id == university_id)
        .order_by(*newest_first(UniversityMajor))
    )
    return list(result.scalars().all())


async def get_major_universities(session: AsyncSession, major_id: int) -> list[UniversityMajor]:
    """All universities offering a major, with their details."""
    result = await session.execute(
        select(UniversityMajor)
        .where(UniversityMajor.major_id == major_id)
        .order_by(*newest_first(UniversityMajor))
    )
    return list(result.scalars().all())


async def get_university_major_details(
    session: AsyncSession, university_id: int, major_id: int
) -> UniversityMajor | None:
    return await get_one(session, UniversityMajor, *_pair(university_id, major_id))


async def create_university_major(
    session: AsyncSession, data: UniversityMajorCreate
) -> UniversityMajor:
    """Offer a major at a university.

    Raises:
        ReferentialIntegrityError: If the university or the major is missing.
        UniquenessViolation: If the pair already exists.
    """
    async with atomic(session):
        await ensure_exists(session, University, data.university_id)
        await ensure_exists(session, Major, data.major_id)
        if await count_where(session, UniversityMajor, *_pair(data.university_id, data.major_id)):
            raise UniquenessViolation(
                "UniversityMajor",
                "(university_id, major_id)",
                f"({data.university_id}, {data.major_id})",
            )

        values = data.model_dump()
        values["study_levels"] = _levels(data.study_levels)
        link = UniversityMajor(**values)
        session.add(link)
        await flush_unique(
            session,
            "UniversityMajor",
            "(university_id, major_id)",
            f"({data.university_id}, {data.major_id})",
        )

    logger.info(f"Linked major {link.major_id} to university {link.university_id}")
    return link


async def update_university_major(
    session: AsyncSession, university_id: int, major_id: int, data: UniversityMajorUpdate
) -> UniversityMajor | None:
    changes = data.changes()
    if "study_levels" in changes:
        changes["study_levels"] = _levels(changes["study_levels"])

    async with atomic(session):
        link = await get_one(session, UniversityMajor, *_pair(university_id, major_id))
        if not link:
            return None
        apply_changes(link, changes)

    logger.info(f"Updated major {major_id} at university {university_id}: {sorted(changes)}")
    return link


async def delete_university_major(session: AsyncSession, university_id: int, major_id: int) -> bool:
    async with atomic(session):
        link = await get_one(session, UniversityMajor, *_pair(university_id, major_id))
        if not link:
            return False
        await session.delete(link)

    logger.info(f"Unlinked major {major_id} from university {university_id}")
    return True
