"""Local persistent cache of help articles.

The cache owns two tables: ``articles`` (one row per article id) and
``cache_metadata`` (one row per logical collection, recording when the full
list was last fetched). Staleness is always recomputed from the fetch
timestamp against ``CACHE_TTL_MS``; the stored ``is_stale`` flag is written
for diagnostics only.

Writes that replace or clear the collection run as a single transaction, so
readers either see the previous table or the new one, never a mix. Live
observers are told about a write only after it commits.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import AsyncIterator, Callable, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from help_articles.domain import Article
from help_articles.models import CachedArticle, CacheMetadata
from help_articles.services.notifier import ChangeNotifier

logger = logging.getLogger(__name__)

CACHE_TTL_MS = 24 * 60 * 60 * 1000  # 24 hours
ARTICLES_LIST_KEY = "articles_list"


def now_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheState:
    has_articles: bool
    is_stale: bool


def _to_row(article: Article, cached_at: int) -> CachedArticle:
    return CachedArticle(
        id=article.id,
        title=article.title,
        summary=article.summary,
        content=article.content,
        last_updated_timestamp=article.last_updated_timestamp,
        cached_at_timestamp=cached_at,
    )


def _to_article(row: CachedArticle) -> Article:
    return Article(
        id=row.id,
        title=row.title,
        summary=row.summary,
        content=row.content,
        last_updated_timestamp=row.last_updated_timestamp,
    )


class ArticleCache:
    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession],
        clock: Callable[[], int] = now_millis,
    ):
        self._sessionmaker = sessionmaker
        self._clock = clock
        self._notifier = ChangeNotifier()

    # -- writes ---------------------------------------------------------

    async def replace_all(self, articles: list[Article]) -> None:
        """Replace the whole collection and stamp the fetch time."""
        now = self._clock()
        # Last occurrence wins on duplicate ids, one row per id
        by_id = {a.id: a for a in articles}
        async with self._sessionmaker.begin() as session:
            await session.execute(delete(CachedArticle))
            session.add_all([_to_row(a, now) for a in by_id.values()])
            await session.merge(
                CacheMetadata(key=ARTICLES_LIST_KEY, last_fetch_timestamp=now, is_stale=False)
            )
        logger.debug("Replaced cached collection with %d articles", len(by_id))
        self._notifier.notify()

    async def upsert_one(self, article: Article) -> None:
        """Insert or overwrite a single article. Fetch metadata is untouched."""
        async with self._sessionmaker.begin() as session:
            await session.merge(_to_row(article, self._clock()))
        logger.debug("Cached article %s", article.id)
        self._notifier.notify()

    async def clear(self) -> None:
        async with self._sessionmaker.begin() as session:
            await session.execute(delete(CachedArticle))
            await session.execute(delete(CacheMetadata).where(CacheMetadata.key == ARTICLES_LIST_KEY))
        logger.info("Cleared article cache")
        self._notifier.notify()

    # -- reads ----------------------------------------------------------

    async def get_all(self) -> list[Article]:
        async with self._sessionmaker() as session:
            return await self._select_all(session)

    async def get_by_id(self, article_id: str) -> Optional[Article]:
        async with self._sessionmaker() as session:
            row = await session.get(CachedArticle, article_id)
            return _to_article(row) if row else None

    async def is_stale(self) -> bool:
        async with self._sessionmaker() as session:
            return await self._is_stale(session)

    async def has_any(self) -> bool:
        async with self._sessionmaker() as session:
            return await self._has_any(session)

    async def get_state(self) -> CacheState:
        """Read emptiness and staleness together, in one session."""
        async with self._sessionmaker() as session:
            return CacheState(
                has_articles=await self._has_any(session),
                is_stale=await self._is_stale(session),
            )

    # -- live streams ---------------------------------------------------

    async def observe_all(self) -> AsyncIterator[list[Article]]:
        # Subscribe before the first read so no commit slips between them
        async with self._notifier.subscribe() as changes:
            yield await self.get_all()
            async for _ in changes:
                yield await self.get_all()

    async def observe_by_id(self, article_id: str) -> AsyncIterator[Optional[Article]]:
        async with self._notifier.subscribe() as changes:
            yield await self.get_by_id(article_id)
            async for _ in changes:
                yield await self.get_by_id(article_id)

    # -- helpers --------------------------------------------------------

    async def _select_all(self, session: AsyncSession) -> list[Article]:
        stmt = select(CachedArticle).order_by(desc(CachedArticle.last_updated_timestamp))
        rows = (await session.execute(stmt)).scalars().all()
        return [_to_article(r) for r in rows]

    async def _has_any(self, session: AsyncSession) -> bool:
        r = await session.execute(select(CachedArticle.id).limit(1))
        return r.scalar_one_or_none() is not None

    async def _is_stale(self, session: AsyncSession) -> bool:
        meta = await session.get(CacheMetadata, ARTICLES_LIST_KEY)
        if meta is None:
            return True
        return self._clock() - meta.last_fetch_timestamp > CACHE_TTL_MS
