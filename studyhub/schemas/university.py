from datetime import datetime

from pydantic import BaseModel

from studyhub.db.models import Status
from studyhub.schemas.common import PaginationInput, PatchModel, localized


class UniversityCreate(BaseModel):
    name_ar: str
    name_en: str
    name_tr: str
    name_ms: str
    slug: str
    country_id: int
    global_ranking: int | None = None
    local_ranking: int | None = None
    teaching_language_ar: str | None = None
    teaching_language_en: str | None = None
    teaching_language_tr: str | None = None
    teaching_language_ms: str | None = None
    description_ar: str | None = None
    description_en: str | None = None
    description_tr: str | None = None
    description_ms: str | None = None
    image_url: str | None = None
    gallery_images: list[str] | None = None
    status: Status = Status.ACTIVE
    meta_title_ar: str | None = None
    meta_title_en: str | None = None
    meta_title_tr: str | None = None
    meta_title_ms: str | None = None
    meta_description_ar: str | None = None
    meta_description_en: str | None = None
    meta_description_tr: str | None = None
    meta_description_ms: str | None = None


class UniversityUpdate(PatchModel):
    non_nullable = localized("name") | {"slug", "country_id", "status"}

    id: int
    name_ar: str | None = None
    name_en: str | None = None
    name_tr: str | None = None
    name_ms: str | None = None
    slug: str | None = None
    country_id: int | None = None
    global_ranking: int | None = None
    local_ranking: int | None = None
    teaching_language_ar: str | None = None
    teaching_language_en: str | None = None
    teaching_language_tr: str | None = None
    teaching_language_ms: str | None = None
    description_ar: str | None = None
    description_en: str | None = None
    description_tr: str | None = None
    description_ms: str | None = None
    image_url: str | None = None
    gallery_images: list[str] | None = None
    status: Status | None = None
    meta_title_ar: str | None = None
    meta_title_en: str | None = None
    meta_title_tr: str | None = None
    meta_title_ms: str | None = None
    meta_description_ar: str | None = None
    meta_description_en: str | None = None
    meta_description_tr: str | None = None
    meta_description_ms: str | None = None


class UniversityResponse(BaseModel):
    id: int
    name_ar: str
    name_en: str
    name_tr: str
    name_ms: str
    slug: str
    country_id: int
    global_ranking: int | None
    local_ranking: int | None
    teaching_language_ar: str | None
    teaching_language_en: str | None
    teaching_language_tr: str | None
    teaching_language_ms: str | None
    description_ar: str | None
    description_en: str | None
    description_tr: str | None
    description_ms: str | None
    image_url: str | None
    gallery_images: list[str] | None
    status: Status
    meta_title_ar: str | None
    meta_title_en: str | None
    meta_title_tr: str | None
    meta_title_ms: str | None
    meta_description_ar: str | None
    meta_description_en: str | None
    meta_description_tr: str | None
    meta_description_ms: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GetUniversitiesInput(PaginationInput):
    country_id: int | None = None
    status: Status | None = None
    search: str | None = None
