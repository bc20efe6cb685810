"""University API routes."""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, page_of, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import universities
from studyhub.schemas.common import Page
from studyhub.schemas.university import (
    GetUniversitiesInput,
    UniversityCreate,
    UniversityResponse,
    UniversityUpdate,
)

router = APIRouter()


@router.get("/", response_model=Page[UniversityResponse])
async def list_universities(
    params: GetUniversitiesInput = Depends(), db: AsyncSession = Depends(get_db)
):
    return page_of(await universities.get_universities(db, params), UniversityResponse)


@router.get("/slug/{slug}", response_model=UniversityResponse)
async def get_university_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    return found(await universities.get_university_by_slug(db, slug), "University")


@router.get("/by-country/{country_id}", response_model=list[UniversityResponse])
async def list_universities_by_country(country_id: int, db: AsyncSession = Depends(get_db)):
    return await universities.get_universities_by_country(db, country_id)


@router.get("/{university_id}", response_model=UniversityResponse)
async def get_university(university_id: int, db: AsyncSession = Depends(get_db)):
    return found(await universities.get_university_by_id(db, university_id), "University")


@router.post("/", response_model=UniversityResponse, status_code=201)
async def create_university(data: UniversityCreate, db: AsyncSession = Depends(get_db)):
    return await universities.create_university(db, data)


@router.patch("/{university_id}", response_model=UniversityResponse)
async def update_university(
    university_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)
):
    data = patch_input(UniversityUpdate, body, id=university_id)
    return found(await universities.update_university(db, data), "University")


@router.delete("/{university_id}")
async def delete_university(university_id: int, db: AsyncSession = Depends(get_db)):
    return deleted(await universities.delete_university(db, university_id), "University")
