"""Site settings routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import found
from studyhub.db.session import get_db
from studyhub.repositories import settings
from studyhub.schemas.setting import SettingResponse, SettingUpdate

router = APIRouter()


@router.get("/", response_model=list[SettingResponse])
async def list_settings(db: AsyncSession = Depends(get_db)):
    return await settings.get_all_settings(db)


@router.get("/languages", response_model=list[str])
async def supported_languages(db: AsyncSession = Depends(get_db)):
    return await settings.get_supported_languages(db)


@router.get("/email", response_model=list[SettingResponse])
async def email_settings(db: AsyncSession = Depends(get_db)):
    return await settings.get_email_settings(db)


@router.get("/seo", response_model=list[SettingResponse])
async def seo_settings(db: AsyncSession = Depends(get_db)):
    return await settings.get_seo_settings(db)


@router.get("/category/{category}", response_model=list[SettingResponse])
async def settings_by_category(category: str, db: AsyncSession = Depends(get_db)):
    return await settings.get_settings_by_category(db, category)


@router.get("/key/{key}", response_model=SettingResponse)
async def get_setting(key: str, db: AsyncSession = Depends(get_db)):
    return found(await settings.get_setting_by_key(db, key), "Setting")


@router.put("/", response_model=SettingResponse)
async def save_setting(data: SettingUpdate, db: AsyncSession = Depends(get_db)):
    return await settings.update_setting(db, data)


@router.put("/bulk")
async def save_settings(items: list[SettingUpdate], db: AsyncSession = Depends(get_db)):
    await settings.update_multiple_settings(db, items)
    return {"saved": len(items)}
