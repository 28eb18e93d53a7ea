"""Offline-first article repository.

Reconciles the remote source with the local cache:

1. serve the cache when it is fresh and no refresh is forced,
2. otherwise fetch from the remote source and write the result to the cache,
3. if the fetch fails, fall back to whatever the cache holds,
4. surface the remote error only when there is nothing cached.

A fallback is a ``Success``; callers that care whether data is fresh must ask
the cache (``ArticleCache.is_stale``).
"""
from __future__ import annotations

import enum
import logging
from typing import AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError

from help_articles.domain import Article, Result, Success, newest_first
from help_articles.services.api_client import ArticleApiClient
from help_articles.services.cache import ArticleCache

logger = logging.getLogger(__name__)


class RefreshOutcome(str, enum.Enum):
    SUCCEED = "succeed"
    RETRY = "retry"

    @classmethod
    def from_result(cls, result: Result) -> "RefreshOutcome":
        if isinstance(result, Success):
            return cls.SUCCEED
        return cls.RETRY


class ArticleRepository:
    def __init__(self, api_client: ArticleApiClient, cache: ArticleCache):
        self._api = api_client
        self._cache = cache

    async def get_collection(self, force_refresh: bool = False) -> Result[list[Article]]:
        state = await self._cache.get_state()

        if not force_refresh and state.has_articles and not state.is_stale:
            return Success(await self._cache.get_all())

        fetched = await self._api.fetch_list()
        if isinstance(fetched, Success):
            articles = newest_first(fetched.data)
            try:
                await self._cache.replace_all(articles)
            except SQLAlchemyError:
                logger.exception("Caching %d fetched articles failed, returning them uncached", len(articles))
            return Success(articles)

        # Re-read after the fetch, the cache may have been cleared meanwhile
        cached = await self._cache.get_all()
        if cached:
            logger.info("Serving cached articles after fetch failure: %s", fetched.error.kind)
            return Success(cached)
        return fetched

    async def get_item(self, article_id: str, force_refresh: bool = False) -> Result[Article]:
        cached = await self._cache.get_by_id(article_id)

        # No TTL at item level, only force_refresh bypasses a cached article
        if not force_refresh and cached is not None:
            return Success(cached)

        fetched = await self._api.fetch_one(article_id)
        if isinstance(fetched, Success):
            try:
                await self._cache.upsert_one(fetched.data)
            except SQLAlchemyError:
                logger.exception("Caching fetched article %s failed, returning it uncached", article_id)
            return fetched

        if cached is not None:
            logger.info("Serving cached article %s after fetch failure: %s", article_id, fetched.error.kind)
            return Success(cached)
        return fetched

    async def refresh_collection(self) -> Result[list[Article]]:
        return await self.get_collection(force_refresh=True)

    def observe_collection(self) -> AsyncIterator[list[Article]]:
        return self._cache.observe_all()

    def observe_item(self, article_id: str) -> AsyncIterator[Optional[Article]]:
        return self._cache.observe_by_id(article_id)

    async def clear_cache(self) -> None:
        await self._cache.clear()

    async def is_stale(self) -> bool:
        return await self._cache.is_stale()
