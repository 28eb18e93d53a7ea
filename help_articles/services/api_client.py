from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from help_articles.domain import (
    Article,
    ArticleDetailResponse,
    ArticlesResponse,
    BackendError,
    BackendErrorResponse,
    DataError,
    Failure,
    NetworkError,
    ParseError,
    Result,
    ServerError,
    Success,
    Timeout,
    Unknown,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _backend_error(resp: httpx.Response) -> Optional[BackendError]:
    try:
        body = BackendErrorResponse.model_validate_json(resp.content)
    except ValidationError:
        return None
    return BackendError(
        error_code=body.error_code,
        error_title=body.error_title,
        error_message=body.error_message,
    )


def _classify_status(resp: httpx.Response) -> DataError:
    # Structured rejection wins over the bare status code
    backend = _backend_error(resp)
    if backend is not None:
        return backend
    return ServerError(resp.status_code)


def _classify_exception(exc: Exception) -> DataError:
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
        return Timeout(exc)
    if isinstance(exc, httpx.HTTPError):
        return NetworkError(exc)
    if isinstance(exc, (ValidationError, json.JSONDecodeError, UnicodeDecodeError)):
        return ParseError(exc)
    return Unknown(exc)


class ArticleApiClient:
    """Request/response client for the remote article source.

    Every call returns a ``Result``; transport and decoding failures are
    classified into a ``DataError`` rather than raised. No caching, no retry.
    """

    def __init__(
        self,
        base_url: str,
        timeout_s: float,
        user_agent: str = "HelpArticles/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._headers = {"User-Agent": user_agent, "Accept": "application/json"}
        self._timeout_s = timeout_s
        self._timeout = httpx.Timeout(timeout_s)
        self._transport = transport

    async def fetch_list(self) -> Result[list[Article]]:
        result = await self._get("/articles", ArticlesResponse)
        if isinstance(result, Success):
            return Success(result.data.articles)
        return result

    async def fetch_one(self, article_id: str) -> Result[Article]:
        result = await self._get(f"/articles/{quote(article_id, safe='')}", ArticleDetailResponse, not_found_id=article_id)
        if isinstance(result, Success):
            return Success(result.data.article)
        return result

    async def _request(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(
            headers=self._headers,
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            resp = await client.get(url)
            await resp.aread()
            return resp

    async def _get(self, path: str, model: type[M], not_found_id: str | None = None) -> Result[M]:
        url = f"{self._base_url}{path}"
        try:
            # httpx timeouts are per phase, this bounds the whole exchange
            resp = await asyncio.wait_for(self._request(url), self._timeout_s)
            logger.info("GET %s -> %s", url, resp.status_code)

            if resp.is_success:
                return Success(model.model_validate_json(resp.content))

            error = _classify_status(resp)
            if not_found_id is not None and resp.status_code == 404 and isinstance(error, ServerError):
                error = BackendError(
                    error_code="NOT_FOUND",
                    error_title="Not Found",
                    error_message=f"Article with ID {not_found_id} not found",
                )
        except Exception as e:
            error = _classify_exception(e)

        logger.warning("GET %s failed: %s (%s)", url, error.kind, error.message)
        return Failure(error)
