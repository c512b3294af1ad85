from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database import get_cached_verdict, save_verdict
from models.db_models import Base, WordCache


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.mark.asyncio
async def test_missing_verdict(session):
    assert await get_cached_verdict(session, "silk", "en", 30) is None


@pytest.mark.asyncio
async def test_save_and_read_verdict(session):
    assert await save_verdict(session, "silk", "en", True, 200)
    assert await save_verdict(session, "wilk", "en", False, 404)
    assert await get_cached_verdict(session, "silk", "en", 30) is True
    assert await get_cached_verdict(session, "wilk", "en", 30) is False
    assert await get_cached_verdict(session, "silk", "fr", 30) is None


@pytest.mark.asyncio
async def test_expired_verdict_is_ignored_then_refreshed(session):
    session.add(WordCache(
        word="silk",
        language="en",
        is_recognized=False,
        status_code=404,
        validated_at=datetime.utcnow() - timedelta(days=40)
    ))
    await session.commit()

    assert await get_cached_verdict(session, "silk", "en", 30) is None

    assert await save_verdict(session, "silk", "en", True, 200)
    rows = (await session.execute(select(WordCache))).scalars().all()
    assert len(rows) == 1
    assert rows[0].is_recognized
    assert rows[0].status_code == 200
    assert await get_cached_verdict(session, "silk", "en", 30) is True
