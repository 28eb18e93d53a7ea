from __future__ import annotations

from sqlalchemy import String, Integer, BigInteger, Text, Index
from sqlalchemy.orm import Mapped, mapped_column
from help_articles.core.db import Base

class CachedArticle(Base):
    __tablename__ = "articles"
    __table_args__ = (
        Index("ix_articles_last_updated", "last_updated_timestamp"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)

    title: Mapped[str] = mapped_column(String, nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Epoch millis, author-assigned
    last_updated_timestamp: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), nullable=False)
    # Epoch millis, set by the cache on write
    cached_at_timestamp: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), nullable=False)
