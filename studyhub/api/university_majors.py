"""Routes for the majors a university offers, keyed by the (university, major) pair."""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import university_majors
from studyhub.schemas.university_major import (
    UniversityMajorCreate,
    UniversityMajorResponse,
    UniversityMajorUpdate,
)

router = APIRouter()


@router.get("/by-university/{university_id}", response_model=list[UniversityMajorResponse])
async def list_university_majors(university_id: int, db: AsyncSession = Depends(get_db)):
    return await university_majors.get_university_majors(db, university_id)


@router.get("/by-major/{major_id}", response_model=list[UniversityMajorResponse])
async def list_major_universities(major_id: int, db: AsyncSession = Depends(get_db)):
    return await university_majors.get_major_universities(db, major_id)


@router.get("/{university_id}/{major_id}", response_model=UniversityMajorResponse)
async def get_university_major(
    university_id: int, major_id: int, db: AsyncSession = Depends(get_db)
):
    link = await university_majors.get_university_major_details(db, university_id, major_id)
    return found(link, "University major")


@router.post("/", response_model=UniversityMajorResponse, status_code=201)
async def create_university_major(
    data: UniversityMajorCreate, db: AsyncSession = Depends(get_db)
):
    return await university_majors.create_university_major(db, data)


@router.patch("/{university_id}/{major_id}", response_model=UniversityMajorResponse)
async def update_university_major(
    university_id: int,
    major_id: int,
    body: dict = Body(...),
    db: AsyncSession = Depends(get_db),
):
    data = patch_input(UniversityMajorUpdate, body)
    link = await university_majors.update_university_major(db, university_id, major_id, data)
    return found(link, "University major")


@router.delete("/{university_id}/{major_id}")
async def delete_university_major(
    university_id: int, major_id: int, db: AsyncSession = Depends(get_db)
):
    removed = await university_majors.delete_university_major(db, university_id, major_id)
    return deleted(removed, "University major")
