"""
Database access for Word Scramble Bot.

The database only holds the dictionary lookup cache: one verdict per
(word, language), refreshed once it is older than the configured expiry.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config import SETTINGS, LOGGER_NAME_DB
from models.db_models import Base, WordCache

logger = logging.getLogger(LOGGER_NAME_DB)

# Cache database engine; sqlite by default
engine = create_async_engine(
    SETTINGS.database_url,
    echo=SETTINGS.dev_mode,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_database() -> None:
    """Create the word cache table if missing."""
    logger.info(f"Preparing word cache at {engine.url.render_as_string(hide_password=True)}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_database() -> None:
    """Dispose of cache connections."""
    await engine.dispose()
    logger.info("Word cache closed.")


async def get_cached_verdict(
    session: AsyncSession,
    word: str,
    language: str,
    max_age_days: int
) -> Optional[bool]:
    """
    Return whether a word was recognized, if a fresh verdict is cached.

    Returns:
        True/False from the cache, or None when missing or expired
    """
    cutoff = datetime.utcnow() - timedelta(days=max_age_days)
    stmt = select(WordCache.is_recognized).where(
        WordCache.word == word,
        WordCache.language == language,
        WordCache.validated_at >= cutoff
    )
    return (await session.execute(stmt)).scalar_one_or_none()


async def save_verdict(
    session: AsyncSession,
    word: str,
    language: str,
    recognized: bool,
    status_code: int
) -> bool:
    """
    Insert or refresh a cached verdict.

    A failed write is logged and rolled back; the lookup result still stands.

    Returns:
        True if the verdict was committed
    """
    stmt = select(WordCache).where(
        WordCache.word == word,
        WordCache.language == language
    )
    entry = (await session.execute(stmt)).scalar_one_or_none()

    if entry is None:
        session.add(WordCache(
            word=word,
            language=language,
            is_recognized=recognized,
            status_code=status_code
        ))
    else:
        entry.is_recognized = recognized
        entry.status_code = status_code
        entry.validated_at = datetime.utcnow()

    try:
        await session.commit()
    except SQLAlchemyError as e:
        logger.warning(f"Failed to cache word '{word}': {e}")
        await session.rollback()
        return False
    return True
