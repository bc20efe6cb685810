"""Student inquiry (lead) repository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import InquiryStatus, StudentInquiry
from studyhub.db.session import atomic
from studyhub.repositories.base import (
    apply_changes,
    build_conditions,
    count_where,
    get_one,
    newest_first,
    paginate,
    search_clause,
)
from studyhub.schemas.common import Page
from studyhub.schemas.student_inquiry import (
    GetStudentInquiriesInput,
    InquiryFilters,
    StudentInquiryCreate,
    StudentInquiryUpdate,
)

logger = logging.getLogger(__name__)

SEARCH_COLUMNS = (StudentInquiry.full_name, StudentInquiry.email, StudentInquiry.phone)


def _filter_conditions(params: InquiryFilters) -> list:
    return build_conditions(
        StudentInquiry.status == params.status if params.status else None,
        StudentInquiry.language_code == params.language_code if params.language_code else None,
        StudentInquiry.created_at >= params.date_from if params.date_from else None,
        StudentInquiry.created_at <= params.date_to if params.date_to else None,
        search_clause(params.search, SEARCH_COLUMNS),
    )


async def get_student_inquiries(session: AsyncSession, params: GetStudentInquiriesInput) -> Page:
    return await paginate(session, StudentInquiry, _filter_conditions(params), params)


async def export_student_inquiries(
    session: AsyncSession, params: InquiryFilters
) -> list[StudentInquiry]:
    """Every inquiry matching the list filters, without pagination."""
    query = select(StudentInquiry).order_by(*newest_first(StudentInquiry))
    conditions = _filter_conditions(params)
    if conditions:
        query = query.where(*conditions)
    result = await session.execute(query)
    inquiries = list(result.scalars().all())
    logger.info(f"Exported {len(inquiries)} student inquiries")
    return inquiries


async def get_student_inquiry_by_id(session: AsyncSession, inquiry_id: int) -> StudentInquiry | None:
    return await get_one(session, StudentInquiry, StudentInquiry.id == inquiry_id)


async def get_new_inquiries_count(session: AsyncSession) -> int:
    return await count_where(session, StudentInquiry, StudentInquiry.status == InquiryStatus.NEW)


async def get_inquiries_by_status(
    session: AsyncSession, status: InquiryStatus
) -> list[StudentInquiry]:
    result = await session.execute(
        select(StudentInquiry)
        .where(StudentInquiry.status == status)
        .order_by(*newest_first(StudentInquiry))
    )
    return list(result.scalars().all())


async def create_student_inquiry(session: AsyncSession, data: StudentInquiryCreate) -> StudentInquiry:
    """Record a lead from a public form. Status always starts at NEW."""
    async with atomic(session):
        inquiry = StudentInquiry(**data.model_dump(), status=InquiryStatus.NEW, notes=None)
        session.add(inquiry)
        await session.flush()

    logger.info(f"Created student inquiry {inquiry.id} ({inquiry.language_code.value})")
    return inquiry


async def update_student_inquiry(
    session: AsyncSession, data: StudentInquiryUpdate
) -> StudentInquiry | None:
    """Admin follow-up: change status and/or notes."""
    changes = data.changes()
    async with atomic(session):
        inquiry = await get_one(session, StudentInquiry, StudentInquiry.id == data.id)
        if not inquiry:
            return None
        apply_changes(inquiry, changes)

    logger.info(f"Updated student inquiry {inquiry.id}: {sorted(changes)}")
    return inquiry


async def delete_student_inquiry(session: AsyncSession, inquiry_id: int) -> bool:
    async with atomic(session):
        inquiry = await get_one(session, StudentInquiry, StudentInquiry.id == inquiry_id)
        if not inquiry:
            return False
        await session.delete(inquiry)

    logger.info(f"Deleted student inquiry {inquiry_id}")
    return True
