"""Major API routes."""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, page_of, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import majors
from studyhub.schemas.common import Page
from studyhub.schemas.major import GetMajorsInput, MajorCreate, MajorResponse, MajorUpdate

router = APIRouter()


@router.get("/", response_model=Page[MajorResponse])
async def list_majors(params: GetMajorsInput = Depends(), db: AsyncSession = Depends(get_db)):
    return page_of(await majors.get_majors(db, params), MajorResponse)


@router.get("/slug/{slug}", response_model=MajorResponse)
async def get_major_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    return found(await majors.get_major_by_slug(db, slug), "Major")


@router.get("/by-university/{university_id}", response_model=list[MajorResponse])
async def list_majors_by_university(university_id: int, db: AsyncSession = Depends(get_db)):
    return await majors.get_majors_by_university(db, university_id)


@router.get("/{major_id}", response_model=MajorResponse)
async def get_major(major_id: int, db: AsyncSession = Depends(get_db)):
    return found(await majors.get_major_by_id(db, major_id), "Major")


@router.post("/", response_model=MajorResponse, status_code=201)
async def create_major(data: MajorCreate, db: AsyncSession = Depends(get_db)):
    return await majors.create_major(db, data)


@router.patch("/{major_id}", response_model=MajorResponse)
async def update_major(major_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)):
    data = patch_input(MajorUpdate, body, id=major_id)
    return found(await majors.update_major(db, data), "Major")


@router.delete("/{major_id}")
async def delete_major(major_id: int, db: AsyncSession = Depends(get_db)):
    return deleted(await majors.delete_major(db, major_id), "Major")
