from pydantic import BaseModel

from studyhub.schemas.student_inquiry import StudentInquiryResponse


class DashboardStats(BaseModel):
    total_countries: int
    total_universities: int
    total_majors: int
    total_articles: int
    total_inquiries: int
    new_inquiries_today: int
    inquiries_by_status: dict[str, int]
    inquiries_by_language: dict[str, int]
    recent_inquiries: list[StudentInquiryResponse]


class ContentStats(BaseModel):
    active_countries: int
    inactive_countries: int
    active_universities: int
    inactive_universities: int
    active_majors: int
    inactive_majors: int
    published_articles: int
    draft_articles: int
    featured_articles: int


class InquiryTrendPoint(BaseModel):
    date: str
    count: int
    new_count: int
    completed_count: int
