"""FAQ routes."""

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import faqs
from studyhub.schemas.faq import FAQCreate, FAQOrder, FAQResponse, FAQUpdate

router = APIRouter()


@router.get("/", response_model=list[FAQResponse])
async def list_faqs(category: str | None = None, db: AsyncSession = Depends(get_db)):
    return await faqs.get_faqs(db, category)


@router.get("/active", response_model=list[FAQResponse])
async def list_active_faqs(category: str | None = None, db: AsyncSession = Depends(get_db)):
    return await faqs.get_active_faqs(db, category)


@router.put("/order")
async def reorder_faqs(items: list[FAQOrder], db: AsyncSession = Depends(get_db)):
    if not await faqs.reorder_faqs(db, items):
        raise HTTPException(status_code=404, detail="One or more FAQs not found")
    return {"reordered": len(items)}


@router.get("/{faq_id}", response_model=FAQResponse)
async def get_faq(faq_id: int, db: AsyncSession = Depends(get_db)):
    return found(await faqs.get_faq_by_id(db, faq_id), "FAQ")


@router.post("/", response_model=FAQResponse, status_code=201)
async def create_faq(data: FAQCreate, db: AsyncSession = Depends(get_db)):
    return await faqs.create_faq(db, data)


@router.patch("/{faq_id}", response_model=FAQResponse)
async def update_faq(faq_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)):
    data = patch_input(FAQUpdate, body)
    return found(await faqs.update_faq(db, faq_id, data), "FAQ")


@router.delete("/{faq_id}")
async def delete_faq(faq_id: int, db: AsyncSession = Depends(get_db)):
    return deleted(await faqs.delete_faq(db, faq_id), "FAQ")
