"""Shared pieces of the validation layer: pagination, list envelope, patches."""

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from studyhub.config import settings

T = TypeVar("T")


class PaginationInput(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=settings.default_page_limit, ge=1, le=settings.max_page_limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Page(BaseModel, Generic[T]):
    """One page of a filtered listing. ``total`` counts every matching row."""

    data: list[T]
    total: int
    page: int
    limit: int


class PatchModel(BaseModel):
    """Base for partial-update inputs.

    A field left out of the payload is absent and must not be touched; a
    field sent as ``null`` is an explicit null-out. Pydantic records which
    fields were actually provided in ``model_fields_set``, and ``changes()``
    returns exactly those.
    """

    # Columns that cannot be nulled out even though the field is optional here
    non_nullable: ClassVar[frozenset[str]] = frozenset()
    # Identifier fields carried in the payload but never written
    key_fields: ClassVar[frozenset[str]] = frozenset({"id"})

    @model_validator(mode="after")
    def reject_null_on_required_columns(self):
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in self.key_fields
        }


def localized(*bases: str) -> frozenset[str]:
    """Expand base field names into their four locale columns."""
    return frozenset(f"{base}_{locale}" for base in bases for locale in ("ar", "en", "tr", "ms"))
