"""Shared test fixtures.

Repositories run against an in-memory SQLite database created fresh for
every test. The HTTP tests drive the FastAPI app through httpx with the
database dependency pointed at the same engine.
"""

import itertools
import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from studyhub.db.models import Base, LOCALES
from studyhub.db.session import get_db
from studyhub.main import app
from studyhub.repositories import countries, majors, universities
from studyhub.schemas.country import CountryCreate
from studyhub.schemas.major import MajorCreate
from studyhub.schemas.university import UniversityCreate


def names(base: str, label: str) -> dict:
    """``names("name", "Turkey")`` -> {"name_ar": "Turkey (ar)", ...}."""
    return {f"{base}_{locale}": f"{label} ({locale})" for locale in LOCALES}


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_country(session):
    counter = itertools.count(1)

    async def _make(**overrides):
        n = next(counter)
        values = {**names("name", f"Country {n}"), "slug": f"country-{n}"}
        values.update(overrides)
        return await countries.create_country(session, CountryCreate(**values))

    return _make


@pytest.fixture
def make_university(session, make_country):
    counter = itertools.count(1)

    async def _make(**overrides):
        n = next(counter)
        if "country_id" not in overrides:
            overrides["country_id"] = (await make_country()).id
        values = {**names("name", f"University {n}"), "slug": f"university-{n}"}
        values.update(overrides)
        return await universities.create_university(session, UniversityCreate(**values))

    return _make


@pytest.fixture
def make_major(session):
    counter = itertools.count(1)

    async def _make(**overrides):
        n = next(counter)
        values = {**names("name", f"Major {n}"), "slug": f"major-{n}"}
        values.update(overrides)
        return await majors.create_major(session, MajorCreate(**values))

    return _make
