"""Country API routes."""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, page_of, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import countries
from studyhub.schemas.common import Page
from studyhub.schemas.country import (
    CountryCreate,
    CountryResponse,
    CountryUpdate,
    GetCountriesInput,
)

router = APIRouter()


@router.get("/", response_model=Page[CountryResponse])
async def list_countries(
    params: GetCountriesInput = Depends(), db: AsyncSession = Depends(get_db)
):
    return page_of(await countries.get_countries(db, params), CountryResponse)


@router.get("/slug/{slug}", response_model=CountryResponse)
async def get_country_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    return found(await countries.get_country_by_slug(db, slug), "Country")


@router.get("/{country_id}", response_model=CountryResponse)
async def get_country(country_id: int, db: AsyncSession = Depends(get_db)):
    return found(await countries.get_country_by_id(db, country_id), "Country")


@router.post("/", response_model=CountryResponse, status_code=201)
async def create_country(data: CountryCreate, db: AsyncSession = Depends(get_db)):
    return await countries.create_country(db, data)


@router.patch("/{country_id}", response_model=CountryResponse)
async def update_country(
    country_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)
):
    data = patch_input(CountryUpdate, body, id=country_id)
    return found(await countries.update_country(db, data), "Country")


@router.delete("/{country_id}")
async def delete_country(country_id: int, db: AsyncSession = Depends(get_db)):
    return deleted(await countries.delete_country(db, country_id), "Country")
