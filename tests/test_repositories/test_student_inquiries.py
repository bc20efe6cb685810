"""Tests for the student inquiry repository."""

from datetime import datetime, timedelta, timezone

import pytest

from studyhub.db.models import InquiryStatus, LanguageCode, now
from studyhub.repositories import student_inquiries
from studyhub.schemas.student_inquiry import (
    GetStudentInquiriesInput,
    InquiryFilters,
    StudentInquiryCreate,
    StudentInquiryUpdate,
)


@pytest.fixture
def make_inquiry(session):
    async def _make(**overrides):
        values = {
            "full_name": "Amina Yusuf",
            "email": "amina@example.com",
            "phone": "+90 555 000 0000",
            "language_code": LanguageCode.AR,
        }
        values.update(overrides)
        return await student_inquiries.create_student_inquiry(
            session, StudentInquiryCreate(**values)
        )

    return _make


class TestInquiryLifecycle:
    @pytest.mark.asyncio
    async def test_new_inquiries_start_as_new(self, make_inquiry, session):
        inquiry = await make_inquiry()

        assert inquiry.status == InquiryStatus.NEW
        assert inquiry.notes is None
        assert await student_inquiries.get_new_inquiries_count(session) == 1

    def test_invalid_email_rejected(self):
        with pytest.raises(ValueError):
            StudentInquiryCreate(
                full_name="X", email="not-an-email", phone="1", language_code=LanguageCode.EN
            )

    @pytest.mark.asyncio
    async def test_follow_up_changes_status_and_notes(self, make_inquiry, session):
        inquiry = await make_inquiry()

        updated = await student_inquiries.update_student_inquiry(
            session,
            StudentInquiryUpdate(
                id=inquiry.id, status=InquiryStatus.CONTACTED, notes="Called on WhatsApp"
            ),
        )
        assert updated.status == InquiryStatus.CONTACTED
        assert updated.notes == "Called on WhatsApp"
        assert updated.full_name == "Amina Yusuf"

        by_status = await student_inquiries.get_inquiries_by_status(
            session, InquiryStatus.CONTACTED
        )
        assert [i.id for i in by_status] == [inquiry.id]
        assert await student_inquiries.get_new_inquiries_count(session) == 0

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, make_inquiry, session):
        inquiry = await make_inquiry()

        assert await student_inquiries.delete_student_inquiry(session, inquiry.id) is True
        assert await student_inquiries.delete_student_inquiry(session, inquiry.id) is False
        assert await student_inquiries.get_student_inquiry_by_id(session, inquiry.id) is None


class TestInquiryFilters:
    @pytest.mark.asyncio
    async def test_search_matches_name_email_or_phone(self, make_inquiry, session):
        await make_inquiry(full_name="Omar Farouk", email="omar@example.com", phone="111")
        await make_inquiry(full_name="Siti Aminah", email="siti@example.my", phone="60123")

        by_name = await student_inquiries.get_student_inquiries(
            session, GetStudentInquiriesInput(search="omar")
        )
        by_phone = await student_inquiries.get_student_inquiries(
            session, GetStudentInquiriesInput(search="60123")
        )
        assert by_name.total == 1
        assert by_phone.data[0].full_name == "Siti Aminah"

    @pytest.mark.asyncio
    async def test_language_and_date_range(self, make_inquiry, session):
        await make_inquiry(language_code=LanguageCode.MS)
        await make_inquiry(language_code=LanguageCode.TR)

        page = await student_inquiries.get_student_inquiries(
            session,
            GetStudentInquiriesInput(
                language_code=LanguageCode.MS,
                date_from=now() - timedelta(hours=1),
                date_to=now() + timedelta(hours=1),
            ),
        )
        assert page.total == 1

        future = await student_inquiries.get_student_inquiries(
            session, GetStudentInquiriesInput(date_from=now() + timedelta(days=1))
        )
        assert future.total == 0

    @pytest.mark.asyncio
    async def test_export_ignores_pagination(self, make_inquiry, session):
        for _ in range(25):
            await make_inquiry(language_code=LanguageCode.EN)
        await make_inquiry(language_code=LanguageCode.AR)

        exported = await student_inquiries.export_student_inquiries(
            session, InquiryFilters(language_code=LanguageCode.EN)
        )
        assert len(exported) == 25

    @pytest.mark.asyncio
    async def test_aware_date_bounds_compare_in_server_time(self, make_inquiry, session):
        await make_inquiry()
        utc_now = datetime.now(timezone.utc)

        later = await student_inquiries.get_student_inquiries(
            session, GetStudentInquiriesInput(date_from=utc_now + timedelta(minutes=1))
        )
        earlier = await student_inquiries.get_student_inquiries(
            session, GetStudentInquiriesInput(date_from=utc_now - timedelta(minutes=1))
        )
        assert later.total == 0
        assert earlier.total == 1

    def test_aware_bounds_become_naive_local(self):
        bound = datetime(2026, 1, 15, 8, 30, tzinfo=timezone.utc)

        filters = InquiryFilters.model_validate(
            {"date_from": "2026-01-15T08:30:00Z", "date_to": bound}
        )

        expected = bound.astimezone().replace(tzinfo=None)
        assert filters.date_from == expected
        assert filters.date_to == expected
        assert filters.date_to.tzinfo is None
