"""Helpers shared by the API routers."""

from fastapi import HTTPException
from pydantic import BaseModel

from studyhub.schemas.common import Page


def found(entity, name: str):
    """Turn a repository's None into a 404."""
    if entity is None:
        raise HTTPException(status_code=404, detail=f"{name} not found")
    return entity


def deleted(removed: bool, name: str) -> dict:
    if not removed:
        raise HTTPException(status_code=404, detail=f"{name} not found")
    return {"deleted": True}


def page_of(result: Page, schema: type[BaseModel]) -> Page:
    return Page[schema](
        data=[schema.model_validate(row) for row in result.data],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


def patch_input(model: type[BaseModel], body: dict, **keys):
    """Build a partial-update model from a JSON body plus path keys.

    Only the keys present in ``body`` end up in the model's fields set.
    """
    return model.model_validate({**body, **keys})
