from datetime import datetime

from pydantic import BaseModel

from studyhub.db.models import Status
from studyhub.schemas.common import PatchModel, localized


class FAQCreate(BaseModel):
    question_ar: str
    question_en: str
    question_tr: str
    question_ms: str
    answer_ar: str
    answer_en: str
    answer_tr: str
    answer_ms: str
    order_index: int = 0
    category: str | None = None
    status: Status = Status.ACTIVE


class FAQUpdate(PatchModel):
    non_nullable = localized("question", "answer") | {"order_index", "status"}
    key_fields = frozenset()

    question_ar: str | None = None
    question_en: str | None = None
    question_tr: str | None = None
    question_ms: str | None = None
    answer_ar: str | None = None
    answer_en: str | None = None
    answer_tr: str | None = None
    answer_ms: str | None = None
    order_index: int | None = None
    category: str | None = None
    status: Status | None = None


class FAQOrder(BaseModel):
    id: int
    order_index: int


class FAQResponse(BaseModel):
    id: int
    question_ar: str
    question_en: str
    question_tr: str
    question_ms: str
    answer_ar: str
    answer_en: str
    answer_tr: str
    answer_ms: str
    order_index: int
    category: str | None
    status: Status
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
