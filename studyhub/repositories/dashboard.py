"""Read-only aggregates for the admin dashboard.

Every number is computed with its own query at call time; nothing is
cached.
"""

from datetime import datetime, timedelta

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.config import settings
from studyhub.db.models import (
    Article,
    Country,
    InquiryStatus,
    Major,
    Status,
    StudentInquiry,
    University,
    now,
)
from studyhub.repositories.base import count_where, newest_first
from studyhub.schemas.dashboard import ContentStats, DashboardStats, InquiryTrendPoint
from studyhub.schemas.student_inquiry import StudentInquiryResponse


def start_of_day(moment: datetime | None = None) -> datetime:
    """Midnight (server-local) of the day containing ``moment``."""
    moment = moment or now()
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


async def _group_inquiries_by(session: AsyncSession, column) -> dict[str, int]:
    """Counts per observed value; values with no inquiries are absent."""
    result = await session.execute(
        select(column, func.count()).select_from(StudentInquiry).group_by(column)
    )
    return {value.value: count for value, count in result.all()}


async def get_dashboard_stats(session: AsyncSession) -> DashboardStats:
    recent = await session.execute(
        select(StudentInquiry)
        .order_by(*newest_first(StudentInquiry))
        .limit(settings.recent_inquiries_limit)
    )

    return DashboardStats(
        total_countries=await count_where(session, Country),
        total_universities=await count_where(session, University),
        total_majors=await count_where(session, Major),
        total_articles=await count_where(session, Article),
        total_inquiries=await count_where(session, StudentInquiry),
        new_inquiries_today=await count_where(
            session, StudentInquiry, StudentInquiry.created_at >= start_of_day()
        ),
        inquiries_by_status=await _group_inquiries_by(session, StudentInquiry.status),
        inquiries_by_language=await _group_inquiries_by(session, StudentInquiry.language_code),
        recent_inquiries=[
            StudentInquiryResponse.model_validate(inquiry) for inquiry in recent.scalars().all()
        ],
    )


async def get_content_stats(session: AsyncSession) -> ContentStats:
    """Active/inactive breakdown per content type, plus featured articles."""
    return ContentStats(
        active_countries=await count_where(session, Country, Country.status == Status.ACTIVE),
        inactive_countries=await count_where(session, Country, Country.status == Status.INACTIVE),
        active_universities=await count_where(
            session, University, University.status == Status.ACTIVE
        ),
        inactive_universities=await count_where(
            session, University, University.status == Status.INACTIVE
        ),
        active_majors=await count_where(session, Major, Major.status == Status.ACTIVE),
        inactive_majors=await count_where(session, Major, Major.status == Status.INACTIVE),
        published_articles=await count_where(session, Article, Article.status == Status.ACTIVE),
        draft_articles=await count_where(session, Article, Article.status == Status.INACTIVE),
        featured_articles=await count_where(session, Article, Article.is_featured.is_(True)),
    )


async def get_inquiry_trends(session: AsyncSession, days: int = 30) -> list[InquiryTrendPoint]:
    """Daily inquiry counts over the last ``days`` days (today included), oldest first."""
    since = start_of_day() - timedelta(days=days - 1)
    day = func.date(StudentInquiry.created_at)
    result = await session.execute(
        select(
            day.label("day"),
            func.count().label("total"),
            func.sum(case((StudentInquiry.status == InquiryStatus.NEW, 1), else_=0)).label("new"),
            func.sum(
                case((StudentInquiry.status == InquiryStatus.COMPLETED, 1), else_=0)
            ).label("completed"),
        )
        .where(StudentInquiry.created_at >= since)
        .group_by(day)
        .order_by(day)
    )
    return [
        InquiryTrendPoint(
            date=str(row.day),
            count=row.total,
            new_count=row.new or 0,
            completed_count=row.completed or 0,
        )
        for row in result.all()
    ]
