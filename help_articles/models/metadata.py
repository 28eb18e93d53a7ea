from __future__ import annotations

from sqlalchemy import String, Boolean, Integer, BigInteger
from sqlalchemy.orm import Mapped, mapped_column
from help_articles.core.db import Base

class CacheMetadata(Base):
    __tablename__ = "cache_metadata"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    last_fetch_timestamp: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), nullable=False)

    # Diagnostic only, staleness is always recomputed from last_fetch_timestamp
    is_stale: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
