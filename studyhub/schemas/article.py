from datetime import datetime

from pydantic import BaseModel

from studyhub.db.models import Status
from studyhub.schemas.common import PaginationInput, PatchModel, localized


class ArticleCreate(BaseModel):
    title_ar: str
    title_en: str
    title_tr: str
    title_ms: str
    slug: str
    content_ar: str | None = None
    content_en: str | None = None
    content_tr: str | None = None
    content_ms: str | None = None
    excerpt_ar: str | None = None
    excerpt_en: str | None = None
    excerpt_tr: str | None = None
    excerpt_ms: str | None = None
    featured_image_url: str | None = None
    category: str | None = None
    country_id: int | None = None
    major_id: int | None = None
    status: Status = Status.ACTIVE
    is_featured: bool = False
    meta_title_ar: str | None = None
    meta_title_en: str | None = None
    meta_title_tr: str | None = None
    meta_title_ms: str | None = None
    meta_description_ar: str | None = None
    meta_description_en: str | None = None
    meta_description_tr: str | None = None
    meta_description_ms: str | None = None


class ArticleUpdate(PatchModel):
    non_nullable = localized("title") | {"slug", "status", "is_featured"}

    id: int
    title_ar: str | None = None
    title_en: str | None = None
    title_tr: str | None = None
    title_ms: str | None = None
    slug: str | None = None
    content_ar: str | None = None
    content_en: str | None = None
    content_tr: str | None = None
    content_ms: str | None = None
    excerpt_ar: str | None = None
    excerpt_en: str | None = None
    excerpt_tr: str | None = None
    excerpt_ms: str | None = None
    featured_image_url: str | None = None
    category: str | None = None
    country_id: int | None = None
    major_id: int | None = None
    status: Status | None = None
    is_featured: bool | None = None
    meta_title_ar: str | None = None
    meta_title_en: str | None = None
    meta_title_tr: str | None = None
    meta_title_ms: str | None = None
    meta_description_ar: str | None = None
    meta_description_en: str | None = None
    meta_description_tr: str | None = None
    meta_description_ms: str | None = None


class ArticleResponse(BaseModel):
    id: int
    title_ar: str
    title_en: str
    title_tr: str
    title_ms: str
    slug: str
    content_ar: str | None
    content_en: str | None
    content_tr: str | None
    content_ms: str | None
    excerpt_ar: str | None
    excerpt_en: str | None
    excerpt_tr: str | None
    excerpt_ms: str | None
    featured_image_url: str | None
    category: str | None
    country_id: int | None
    major_id: int | None
    status: Status
    is_featured: bool
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


class GetArticlesInput(PaginationInput):
    country_id: int | None = None
    major_id: int | None = None
    category: str | None = None
    status: Status | None = None
    is_featured: bool | None = None
    search: str | None = None
