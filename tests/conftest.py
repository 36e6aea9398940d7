import asyncio
import os
import random
import tempfile
from pathlib import Path

# Settings are read at import time; point the app at a throwaway database first
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'manifest_garden_test.db'}",
)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from manifest_garden.infrastructure.database.connection import get_db, init_db, make_engine
from manifest_garden.infrastructure.database.repository import (
    BookRepository,
    InventoryRepository,
    JournalRepository,
    ProfileRepository,
    QuestRepository,
    RankingRepository,
    SeedRepository,
    SharedManifestationRepository,
    WeeklyManifestationRepository,
)
from manifest_garden.main import app

USERNAME = "Dreamer"


@pytest.fixture
async def engine(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'garden.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)


@pytest.fixture
def profile_repo(session):
    return ProfileRepository(session)


@pytest.fixture
def book_repo(session):
    return BookRepository(session)


@pytest.fixture
def shared_repo(session):
    return SharedManifestationRepository(session)


@pytest.fixture
def weekly_repo(session):
    return WeeklyManifestationRepository(session)


@pytest.fixture
def inventory_repo(session):
    return InventoryRepository(session)


@pytest.fixture
def seed_repo(session):
    return SeedRepository(session)


@pytest.fixture
def journal_repo(session):
    return JournalRepository(session)


@pytest.fixture
def quest_repo(session):
    return QuestRepository(session)


@pytest.fixture
def ranking_repo(session):
    return RankingRepository(session)


@pytest.fixture
def client(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    asyncio.run(init_db(engine))
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())
