"""FAQ repository. FAQs are listed by ascending ``order_index``."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import FAQ, Status, now
from studyhub.db.session import atomic
from studyhub.repositories.base import apply_changes, get_one
from studyhub.schemas.faq import FAQCreate, FAQOrder, FAQUpdate

logger = logging.getLogger(__name__)


async def _ordered(session: AsyncSession, *conditions) -> list[FAQ]:
    query = select(FAQ).order_by(FAQ.order_index.asc(), FAQ.id.asc())
    if conditions:
        query = query.where(*conditions)
    result = await session.execute(query)
    return list(result.scalars().all())


async def get_faqs(session: AsyncSession, category: str | None = None) -> list[FAQ]:
    if category is None:
        return await _ordered(session)
    return await _ordered(session, FAQ.category == category)


async def get_active_faqs(session: AsyncSession, category: str | None = None) -> list[FAQ]:
    conditions = [FAQ.status == Status.ACTIVE]
    if category is not None:
        conditions.append(FAQ.category == category)
    return await _ordered(session, *conditions)


async def get_faq_by_id(session: AsyncSession, faq_id: int) -> FAQ | None:
    return await get_one(session, FAQ, FAQ.id == faq_id)


async def create_faq(session: AsyncSession, data: FAQCreate) -> FAQ:
    async with atomic(session):
        faq = FAQ(**data.model_dump())
        session.add(faq)
        await session.flush()

    logger.info(f"Created FAQ {faq.id} at position {faq.order_index}")
    return faq


async def update_faq(session: AsyncSession, faq_id: int, data: FAQUpdate) -> FAQ | None:
    changes = data.changes()
    async with atomic(session):
        faq = await get_one(session, FAQ, FAQ.id == faq_id)
        if not faq:
            return None
        apply_changes(faq, changes)

    logger.info(f"Updated FAQ {faq_id}: {sorted(changes)}")
    return faq


async def delete_faq(session: AsyncSession, faq_id: int) -> bool:
    async with atomic(session):
        faq = await get_one(session, FAQ, FAQ.id == faq_id)
        if not faq:
            return False
        await session.delete(faq)

    logger.info(f"Deleted FAQ {faq_id}")
    return True


async def reorder_faqs(session: AsyncSession, items: list[FAQOrder]) -> bool:
    """Assign new positions to several FAQs at once.

    All or nothing: if any id is missing no position changes and False is
    returned.
    """
    if not items:
        return True

    ids = {item.id for item in items}
    async with atomic(session):
        result = await session.execute(select(FAQ).where(FAQ.id.in_(ids)).with_for_update())
        faqs = {faq.id: faq for faq in result.scalars().all()}
        missing = ids - faqs.keys()
        if missing:
            logger.warning(f"Reorder rejected, unknown FAQ ids: {sorted(missing)}")
            return False

        timestamp = now()
        for item in items:
            faq = faqs[item.id]
            faq.order_index = item.order_index
            faq.updated_at = timestamp

    logger.info(f"Reordered {len(items)} FAQs")
    return True
