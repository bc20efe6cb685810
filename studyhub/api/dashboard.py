"""Admin dashboard routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.session import get_db
from studyhub.repositories import dashboard
from studyhub.schemas.dashboard import ContentStats, DashboardStats, InquiryTrendPoint

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def stats(db: AsyncSession = Depends(get_db)):
    return await dashboard.get_dashboard_stats(db)


@router.get("/content", response_model=ContentStats)
async def content_stats(db: AsyncSession = Depends(get_db)):
    return await dashboard.get_content_stats(db)


@router.get("/trends", response_model=list[InquiryTrendPoint])
async def inquiry_trends(
    days: int = Query(default=30, ge=1, le=365), db: AsyncSession = Depends(get_db)
):
    return await dashboard.get_inquiry_trends(db, days)
