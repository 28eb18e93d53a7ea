from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from help_articles.api.deps import get_repository
from help_articles.domain import Article, BackendError, DataError, ServerError, Success, Timeout
from help_articles.services.repository import ArticleRepository

router = APIRouter(prefix="/v1", tags=["public"])

NOT_FOUND_CODES = {"NOT_FOUND", "ARTICLE_NOT_FOUND"}

def _article_json(a: Article) -> dict:
    return a.model_dump(by_alias=True)

def error_detail(error: DataError) -> dict:
    code = None
    title = None
    if isinstance(error, ServerError):
        code = error.code
    elif isinstance(error, BackendError):
        code = error.error_code
        title = error.error_title
    return {"kind": error.kind, "code": code, "title": title, "message": error.message}

def _raise_for(error: DataError) -> None:
    if isinstance(error, Timeout):
        status = 504
    elif isinstance(error, BackendError) and error.error_code in NOT_FOUND_CODES:
        status = 404
    else:
        status = 502
    raise HTTPException(status_code=status, detail=error_detail(error))

@router.get("/articles")
async def list_articles(
    force_refresh: bool = Query(default=False),
    repository: ArticleRepository = Depends(get_repository),
):
    result = await repository.get_collection(force_refresh=force_refresh)
    if not isinstance(result, Success):
        _raise_for(result.error)

    return {
        "items": [_article_json(a) for a in result.data],
        # A fallback is still a success, staleness tells the caller
        "stale": await repository.is_stale(),
    }

@router.get("/articles/{article_id}")
async def get_article(
    article_id: str,
    force_refresh: bool = Query(default=False),
    repository: ArticleRepository = Depends(get_repository),
):
    result = await repository.get_item(article_id, force_refresh=force_refresh)
    if not isinstance(result, Success):
        _raise_for(result.error)
    return _article_json(result.data)
