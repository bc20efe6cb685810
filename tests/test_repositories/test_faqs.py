"""Tests for FAQ ordering and CRUD."""

import pytest

from conftest import names
from studyhub.db.models import Status
from studyhub.repositories import faqs
from studyhub.schemas.faq import FAQCreate, FAQOrder, FAQUpdate


@pytest.fixture
def make_faq(session):
    async def _make(**overrides):
        values = {**names("question", "How?"), **names("answer", "Like this.")}
        values.update(overrides)
        return await faqs.create_faq(session, FAQCreate(**values))

    return _make


class TestFAQOrdering:
    @pytest.mark.asyncio
    async def test_listed_by_order_index(self, make_faq, session):
        third = await make_faq(order_index=3)
        first = await make_faq(order_index=1)
        second = await make_faq(order_index=2)

        listed = await faqs.get_faqs(session)
        assert [f.id for f in listed] == [first.id, second.id, third.id]

    @pytest.mark.asyncio
    async def test_reorder(self, make_faq, session):
        a = await make_faq(order_index=0)
        b = await make_faq(order_index=1)

        assert await faqs.reorder_faqs(
            session, [FAQOrder(id=a.id, order_index=5), FAQOrder(id=b.id, order_index=4)]
        )
        assert [f.id for f in await faqs.get_faqs(session)] == [b.id, a.id]

    @pytest.mark.asyncio
    async def test_reorder_with_unknown_id_changes_nothing(self, make_faq, session):
        faq = await make_faq(order_index=1)

        ok = await faqs.reorder_faqs(
            session, [FAQOrder(id=faq.id, order_index=9), FAQOrder(id=999, order_index=0)]
        )

        assert ok is False
        assert (await faqs.get_faq_by_id(session, faq.id)).order_index == 1

    @pytest.mark.asyncio
    async def test_reorder_empty_list(self, session):
        assert await faqs.reorder_faqs(session, []) is True


class TestFAQFilters:
    @pytest.mark.asyncio
    async def test_category_and_active(self, make_faq, session):
        await make_faq(category="visa")
        await make_faq(category="visa", status=Status.INACTIVE)
        await make_faq(category="housing")

        assert len(await faqs.get_faqs(session, "visa")) == 2
        assert len(await faqs.get_active_faqs(session, "visa")) == 1
        assert len(await faqs.get_active_faqs(session)) == 2

    @pytest.mark.asyncio
    async def test_update_and_delete(self, make_faq, session):
        faq = await make_faq()

        updated = await faqs.update_faq(session, faq.id, FAQUpdate(category="fees"))
        assert updated.category == "fees"
        assert updated.question_en == faq.question_en
        assert await faqs.update_faq(session, 999, FAQUpdate(category="fees")) is None

        assert await faqs.delete_faq(session, faq.id) is True
        assert await faqs.delete_faq(session, faq.id) is False
