from datetime import datetime

from pydantic import BaseModel

from studyhub.db.models import Status
from studyhub.schemas.common import PaginationInput, PatchModel, localized


class CountryCreate(BaseModel):
    name_ar: str
    name_en: str
    name_tr: str
    name_ms: str
    slug: str
    description_ar: str | None = None
    description_en: str | None = None
    description_tr: str | None = None
    description_ms: str | None = None
    image_url: str | None = None
    status: Status = Status.ACTIVE
    meta_title_ar: str | None = None
    meta_title_en: str | None = None
    meta_title_tr: str | None = None
    meta_title_ms: str | None = None
    meta_description_ar: str | None = None
    meta_description_en: str | None = None
    meta_description_tr: str | None = None
    meta_description_ms: str | None = None


class CountryUpdate(PatchModel):
    non_nullable = localized("name") | {"slug", "status"}

    id: int
    name_ar: str | None = None
    name_en: str | None = None
    name_tr: str | None = None
    name_ms: str | None = None
    slug: str | None = None
    description_ar: str | None = None
    description_en: str | None = None
    description_tr: str | None = None
    description_ms: str | None = None
    image_url: str | None = None
    status: Status | None = None
    meta_title_ar: str | None = None
    meta_title_en: str | None = None
    meta_title_tr: str | None = None
    meta_title_ms: str | None = None
    meta_description_ar: str | None = None
    meta_description_en: str | None = None
    meta_description_tr: str | None = None
    meta_description_ms: str | None = None


class CountryResponse(BaseModel):
    id: int
    name_ar: str
    name_en: str
    name_tr: str
    name_ms: str
    slug: str
    description_ar: str | None
    description_en: str | None
    description_tr: str | None
    description_ms: str | None
    image_url: str | None
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


class GetCountriesInput(PaginationInput):
    status: Status | None = None
    search: str | None = None
