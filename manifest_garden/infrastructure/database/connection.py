"""Database connection and session management."""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from manifest_garden.core.config import settings
from manifest_garden.domain.catalog import AVAILABLE_BOOKS
from manifest_garden.infrastructure.database.models import Base
from manifest_garden.infrastructure.database.repository import BookRepository

logger = logging.getLogger(__name__)


def make_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for *database_url*.

    SQLite gets ``NullPool``: aiosqlite connections are bound to the event
    loop that opened them, so nothing is reused across loops.
    """
    engine_kwargs = {"poolclass": NullPool} if database_url.startswith("sqlite") else {}
    return create_async_engine(database_url, echo=echo, future=True, **engine_kwargs)


engine = make_engine(settings.database_url, echo=settings.database_echo)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with async_session_maker() as session:
        yield session


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """Create tables and load the built-in book catalog."""
    bind = bind or engine
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        added = await BookRepository(session).seed_catalog(AVAILABLE_BOOKS)
    if added:
        logger.info("Seeded %d catalog books", added)
