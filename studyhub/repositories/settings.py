"""Key-value site settings with update-or-insert semantics."""

import json
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.config import settings as app_settings
from studyhub.db.models import Setting
from studyhub.db.session import atomic
from studyhub.repositories.base import apply_changes, flush_unique, get_one
from studyhub.schemas.setting import SettingUpdate

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES_KEY = "supported_languages"
EMAIL_CATEGORY = "email"
SEO_CATEGORY = "seo"


async def get_all_settings(session: AsyncSession) -> list[Setting]:
    result = await session.execute(select(Setting).order_by(Setting.key.asc()))
    return list(result.scalars().all())


async def get_setting_by_key(session: AsyncSession, key: str) -> Setting | None:
    return await get_one(session, Setting, Setting.key == key)


async def get_settings_by_category(session: AsyncSession, category: str) -> list[Setting]:
    result = await session.execute(
        select(Setting).where(Setting.category == category).order_by(Setting.key.asc())
    )
    return list(result.scalars().all())


async def _upsert(session: AsyncSession, data: SettingUpdate) -> Setting:
    # Row lock so two writers of the same key serialize on the update path
    result = await session.execute(
        select(Setting).where(Setting.key == data.key).with_for_update()
    )
    setting = result.scalar_one_or_none()
    if setting:
        apply_changes(setting, {"value": data.value})
    else:
        setting = Setting(key=data.key, value=data.value)
        session.add(setting)
    await flush_unique(session, "Setting", "key", data.key)
    return setting


async def update_setting(session: AsyncSession, data: SettingUpdate) -> Setting:
    """Set ``key`` to ``value``, creating the setting if it does not exist.

    Description and category of an existing setting are kept.
    """
    async with atomic(session):
        setting = await _upsert(session, data)

    logger.info(f"Saved setting '{setting.key}'")
    return setting


async def update_multiple_settings(session: AsyncSession, items: list[SettingUpdate]) -> bool:
    """Upsert several settings as one unit; any failure leaves none applied."""
    if not items:
        return True

    async with atomic(session):
        for item in items:
            await _upsert(session, item)

    logger.info(f"Saved {len(items)} settings")
    return True


async def get_supported_languages(session: AsyncSession) -> list[str]:
    """Languages from the ``supported_languages`` JSON array setting.

    Falls back to the configured defaults when the setting is missing, is
    not valid JSON, or is not a list of strings.
    """
    defaults = list(app_settings.default_supported_languages)
    setting = await get_setting_by_key(session, SUPPORTED_LANGUAGES_KEY)
    if not setting:
        return defaults

    try:
        languages = json.loads(setting.value)
    except json.JSONDecodeError:
        logger.warning(f"Setting '{SUPPORTED_LANGUAGES_KEY}' is not valid JSON")
        return defaults

    if not isinstance(languages, list) or not all(isinstance(lang, str) for lang in languages):
        logger.warning(f"Setting '{SUPPORTED_LANGUAGES_KEY}' is not a list of strings")
        return defaults
    return languages


async def get_email_settings(session: AsyncSession) -> list[Setting]:
    return await get_settings_by_category(session, EMAIL_CATEGORY)


async def get_seo_settings(session: AsyncSession) -> list[Setting]:
    return await get_settings_by_category(session, SEO_CATEGORY)
