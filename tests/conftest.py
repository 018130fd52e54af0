import random
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from stayfit.db.base import Base
from stayfit.db.session import create_session_maker
from stayfit.models import *  # noqa: F401, F403 - register all models
from stayfit.services.seeding import seed_database

# Fixed clock so generated dates are predictable
NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def engine(tmp_path):
    # File-backed SQLite so every connection sees the same data
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'stayfit.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest_asyncio.fixture
async def seeded(session_maker):
    """A committed dataset of 15 users."""
    return await seed_database(session_maker, random.Random(42), now=NOW, user_count=15)
