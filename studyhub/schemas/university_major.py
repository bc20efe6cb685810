from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from studyhub.db.models import StudyLevel
from studyhub.schemas.common import PatchModel


def money():
    # Tuition is stored as NUMERIC(10, 2)
    return Field(default=None, max_digits=10, decimal_places=2)


def _unique_levels(levels: list[StudyLevel] | None) -> list[StudyLevel] | None:
    if levels is None:
        return None
    return list(dict.fromkeys(levels))


class UniversityMajorCreate(BaseModel):
    university_id: int
    major_id: int
    study_levels: list[StudyLevel] = Field(min_length=1)
    tuition_fee_min: Decimal | None = money()
    tuition_fee_max: Decimal | None = money()
    currency: str | None = None
    duration_years: int | None = None
    requirements_ar: str | None = None
    requirements_en: str | None = None
    requirements_tr: str | None = None
    requirements_ms: str | None = None

    @field_validator("study_levels")
    @classmethod
    def dedupe_levels(cls, levels):
        return _unique_levels(levels)


class UniversityMajorUpdate(PatchModel):
    """Changes to one university/major pairing; the pair itself is the key."""

    non_nullable = frozenset({"study_levels"})
    key_fields = frozenset()

    study_levels: list[StudyLevel] | None = Field(default=None, min_length=1)
    tuition_fee_min: Decimal | None = money()
    tuition_fee_max: Decimal | None = money()
    currency: str | None = None
    duration_years: int | None = None
    requirements_ar: str | None = None
    requirements_en: str | None = None
    requirements_tr: str | None = None
    requirements_ms: str | None = None

    @field_validator("study_levels")
    @classmethod
    def dedupe_levels(cls, levels):
        return _unique_levels(levels)


class UniversityMajorResponse(BaseModel):
    id: int
    university_id: int
    major_id: int
    study_levels: list[StudyLevel]
    tuition_fee_min: Decimal | None
    tuition_fee_max: Decimal | None
    currency: str | None
    duration_years: int | None
    requirements_ar: str | None
    requirements_en: str | None
    requirements_tr: str | None
    requirements_ms: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
