"""
SQLAlchemy database models for Word Scramble.
Only dictionary lookups are persisted; game sessions live in memory.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    String,
    Integer,
    Boolean,
    DateTime,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class WordCache(Base):
    """
    Cache for dictionary lookup results.

    Stores verdicts from the dictionary API to avoid repeated requests.
    """
    __tablename__ = "word_cache"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    language: Mapped[str] = mapped_column(String(10), nullable=False, default="en")

    is_recognized: Mapped[bool] = mapped_column(Boolean, nullable=False)
    status_code: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    validated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    __table_args__ = (
        UniqueConstraint("word", "language", name="unique_word_per_language"),
    )
