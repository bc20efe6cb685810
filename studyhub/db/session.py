import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from studyhub.config import settings

logger = logging.getLogger(__name__)

# Content PostgreSQL
engine = create_async_engine(
    settings.database_url, echo=settings.app_debug, pool_size=settings.db_pool_size
)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session


@asynccontextmanager
async def atomic(session: AsyncSession):
    """Run a block of reads and writes as one unit of work.

    Commits when the block exits cleanly. Any exception rolls the whole
    unit back and is re-raised unchanged.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
