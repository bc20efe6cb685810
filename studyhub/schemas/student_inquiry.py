from datetime import datetime

from pydantic import BaseModel, EmailStr, field_validator

from studyhub.db.models import InquiryStatus, LanguageCode, StudyLevel
from studyhub.schemas.common import PaginationInput, PatchModel


class StudentInquiryCreate(BaseModel):
    full_name: str
    email: EmailStr
    phone: str
    whatsapp: str | None = None
    desired_country: str | None = None
    study_level: StudyLevel | None = None
    desired_major: str | None = None
    message: str | None = None
    source_page: str | None = None
    language_code: LanguageCode


class StudentInquiryUpdate(PatchModel):
    non_nullable = frozenset({"status"})

    id: int
    status: InquiryStatus | None = None
    notes: str | None = None


class StudentInquiryResponse(BaseModel):
    id: int
    full_name: str
    email: str
    phone: str
    whatsapp: str | None
    desired_country: str | None
    study_level: StudyLevel | None
    desired_major: str | None
    message: str | None
    source_page: str | None
    language_code: LanguageCode
    status: InquiryStatus
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class InquiryFilters(BaseModel):
    status: InquiryStatus | None = None
    language_code: LanguageCode | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    search: str | None = None

    @field_validator("date_from", "date_to")
    @classmethod
    def to_server_local(cls, value: datetime | None) -> datetime | None:
        # created_at is naive server-local time
        if value is None or value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)


class GetStudentInquiriesInput(PaginationInput, InquiryFilters):
    pass
