"""Student inquiry routes: the public form submission plus admin follow-up."""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, page_of, patch_input
from studyhub.db.models import InquiryStatus
from studyhub.db.session import get_db
from studyhub.repositories import student_inquiries
from studyhub.schemas.common import Page
from studyhub.schemas.student_inquiry import (
    GetStudentInquiriesInput,
    InquiryFilters,
    StudentInquiryCreate,
    StudentInquiryResponse,
    StudentInquiryUpdate,
)

router = APIRouter()


@router.get("/", response_model=Page[StudentInquiryResponse])
async def list_inquiries(
    params: GetStudentInquiriesInput = Depends(), db: AsyncSession = Depends(get_db)
):
    result = await student_inquiries.get_student_inquiries(db, params)
    return page_of(result, StudentInquiryResponse)


@router.get("/export", response_model=list[StudentInquiryResponse])
async def export_inquiries(params: InquiryFilters = Depends(), db: AsyncSession = Depends(get_db)):
    """Every matching inquiry in one response, for spreadsheet export."""
    return await student_inquiries.export_student_inquiries(db, params)


@router.get("/new-count")
async def count_new_inquiries(db: AsyncSession = Depends(get_db)):
    return {"count": await student_inquiries.get_new_inquiries_count(db)}


@router.get("/status/{status}", response_model=list[StudentInquiryResponse])
async def list_inquiries_by_status(status: InquiryStatus, db: AsyncSession = Depends(get_db)):
    return await student_inquiries.get_inquiries_by_status(db, status)


@router.get("/{inquiry_id}", response_model=StudentInquiryResponse)
async def get_inquiry(inquiry_id: int, db: AsyncSession = Depends(get_db)):
    inquiry = await student_inquiries.get_student_inquiry_by_id(db, inquiry_id)
    return found(inquiry, "Student inquiry")


@router.post("/", response_model=StudentInquiryResponse, status_code=201)
async def create_inquiry(data: StudentInquiryCreate, db: AsyncSession = Depends(get_db)):
    return await student_inquiries.create_student_inquiry(db, data)


@router.patch("/{inquiry_id}", response_model=StudentInquiryResponse)
async def update_inquiry(
    inquiry_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)
):
    data = patch_input(StudentInquiryUpdate, body, id=inquiry_id)
    return found(await student_inquiries.update_student_inquiry(db, data), "Student inquiry")


@router.delete("/{inquiry_id}")
async def delete_inquiry(inquiry_id: int, db: AsyncSession = Depends(get_db)):
    removed = await student_inquiries.delete_student_inquiry(db, inquiry_id)
    return deleted(removed, "Student inquiry")
